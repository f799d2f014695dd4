import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from oddstrack.api.routes import router
from oddstrack.config import settings
from oddstrack.core.errors import OddsTrackError
from oddstrack.core.log import setup_logging
from oddstrack.db.base import make_engine
from oddstrack.db.crud import HistoryStore
from oddstrack.services import HistoryService
from oddstrack.vision.ocr import TesseractRecognizer

logger = logging.getLogger(__name__)


def default_service() -> HistoryService:
    store = HistoryStore(make_engine(settings.db_dsn))
    recognizer = TesseractRecognizer(lang=settings.ocr_lang, tesseract_cmd=settings.tesseract_cmd)
    return HistoryService(store, recognizer)


def create_app(service: HistoryService | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        app.state.service = service or default_service()
        app.state.service.store.init()
        yield

    app = FastAPI(title="OddsTrack", lifespan=lifespan)
    app.include_router(router)

    @app.exception_handler(OddsTrackError)
    async def domain_error(request: Request, exc: OddsTrackError) -> JSONResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=422, content={'success': False, 'error': exc.code, 'detail': exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("%s %s storage failure", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"success": False, "error": "storage_error", "detail": "storage unavailable"})

    @app.get("/")
    def home():
        return {"ok": True, "app": "OddsTrack"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def serve():
    uvicorn.run("oddstrack.api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.concurrency import run_in_threadpool

from oddstrack.analytics.prediction import FORECAST, MOVING_WINDOW
from oddstrack.api.deps import Caller, current_caller, get_service
from oddstrack.api.schemas import IngestOut, ManualIn, ReplaceIn, HistoryItem, StatsOut, PredictOut, ErrorOut
from oddstrack.services import HistoryService

router = APIRouter(responses={422: {"model": ErrorOut}})


@router.post('/upload', response_model=IngestOut)
async def upload(image: UploadFile = File(...), caller: Caller = Depends(current_caller),
                 service: HistoryService = Depends(get_service)):
    data = await image.read()
    inserted = await run_in_threadpool(service.ingest_image, caller.user_id, data)
    return {'inserted': inserted}


@router.post('/replace', response_model=IngestOut)
def replace(data: ReplaceIn, caller: Caller = Depends(current_caller),
            service: HistoryService = Depends(get_service)):
    return {'inserted': service.ingest_replace(caller.user_id, data.text)}


@router.post('/manual', response_model=IngestOut)
def manual(data: ManualIn, caller: Caller = Depends(current_caller),
           service: HistoryService = Depends(get_service)):
    return {'inserted': service.ingest_append(caller.user_id, data.tokens())}


@router.get('/history', response_model=list[HistoryItem])
def history(caller: Caller = Depends(current_caller), service: HistoryService = Depends(get_service)):
    return service.get_history(caller.user_id)


@router.get('/stats', response_model=StatsOut)
def stats(caller: Caller = Depends(current_caller), service: HistoryService = Depends(get_service)):
    return service.get_statistics(caller.user_id)


@router.get('/predict', response_model=PredictOut, response_model_exclude_none=True)
def predict(mode: str = Query(FORECAST, pattern=f"^({FORECAST}|{MOVING_WINDOW})$"),
            caller: Caller = Depends(current_caller), service: HistoryService = Depends(get_service)):
    return service.get_prediction(caller.user_id, mode=mode)

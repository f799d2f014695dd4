from dataclasses import dataclass

from fastapi import Depends, Header, HTTPException, Request

from oddstrack.config import settings
from oddstrack.services import HistoryService

ALLOWED_ROLES = ("admin", "user")


@dataclass
class Caller:
    user_id: str
    role: str


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


def current_caller(
    user_id: str | None = Header(default=None, alias="X-User-Id"),
    role: str | None = Header(default=None, alias="X-User-Role"),
    ok=Depends(_auth),
) -> Caller:
    # identity is verified upstream; we only require that it is present
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing caller identity")
    if role not in ALLOWED_ROLES:
        raise HTTPException(status_code=403, detail="Access forbidden")
    return Caller(user_id=user_id, role=role)


def get_service(request: Request) -> HistoryService:
    return request.app.state.service

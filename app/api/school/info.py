"""정보 라우터 — 서버 설정 정보 (Server information endpoints)."""

from fastapi import APIRouter

from app.config import settings
from app.utils.logging import get_logger

log = get_logger(__name__)

router: APIRouter = APIRouter()


@router.get("/port", response_model=str)
async def get_port() -> str:
    log.debug("get_port", port=settings.SERVER_PORT)
    return f"Current port: {settings.SERVER_PORT}"

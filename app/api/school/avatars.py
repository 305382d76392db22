"""아바타 라우터 — 아바타 목록, 업로드, 다운로드 엔드포인트.

Avatar Router — Paged listing, upload and raw download of avatars.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.avatar import AvatarResponse
from app.services.avatar_service import avatar_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page[AvatarResponse])
async def list_avatars(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[int | None, Query(description="페이지 번호, 0부터 (0-based page)")] = None,
    size: Annotated[int | None, Query(description="페이지 크기, 최대 100 (Page size, capped at 100)")] = None,
) -> Page[AvatarResponse]:
    """아바타 목록을 페이지 단위로 조회합니다.

    List avatar metadata page by page. Out-of-range page/size values are
    normalized rather than rejected.
    """
    return await avatar_service.list_avatars(db, page, size)


@router.post("/{student_id}", response_model=AvatarResponse, status_code=201)
async def upload_avatar(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    file: UploadFile = File(...),
) -> AvatarResponse:
    """학생 아바타를 업로드합니다 (기존 아바타 교체).

    Upload a student's avatar, replacing the previous one.
    """
    # 상한 + 1 바이트까지만 읽음 — anything longer is rejected without buffering it all
    data: bytes = await file.read(settings.AVATAR_MAX_BYTES + 1)
    result: AvatarResponse = await avatar_service.upload_avatar(
        db, student_id, file.filename, file.content_type, data
    )
    await db.commit()
    return result


@router.get("/{avatar_id}/data")
async def get_avatar_data(
    avatar_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    data, media_type = await avatar_service.get_avatar_data(db, avatar_id)
    return Response(content=data, media_type=media_type)

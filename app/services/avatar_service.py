"""아바타 서비스 — 아바타 목록/업로드/다운로드 비즈니스 로직.

Avatar Service — Business logic for paged avatar listing, upload and
raw data download.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.school import Avatar
from app.repositories.avatar_repository import avatar_repository
from app.repositories.student_repository import student_repository
from app.schemas.avatar import AvatarResponse
from app.utils.exceptions import NotFoundError, PayloadTooLargeError, StudentNotFoundError
from app.utils.logging import get_logger
from app.utils.pagination import Page, PageRequest, validate_page_request

log = get_logger(__name__)

DEFAULT_MEDIA_TYPE: str = "application/octet-stream"


class AvatarService:
    """아바타 관련 비즈니스 로직을 처리하는 서비스.

    Service handling avatar business logic.
    """

    def _to_response(self, avatar: Avatar) -> AvatarResponse:
        return AvatarResponse(
            id=avatar.id,
            file_path=avatar.file_path,
            file_size=avatar.file_size,
            media_type=avatar.media_type,
            student_id=avatar.student_id,
        )

    async def list_avatars(
        self,
        db: AsyncSession,
        page: int | None,
        size: int | None,
    ) -> Page[AvatarResponse]:
        """아바타 목록을 페이지 단위로 조회합니다.

        Return one page of avatar metadata. Page and size are normalized,
        never rejected: page < 0 -> 0, size <= 0 -> 10, size > 100 -> 100.
        """
        log.info("list_avatars", page=page, size=size)
        page_request: PageRequest = validate_page_request(page, size)
        log.debug("page_request_normalized", page=page_request.page, size=page_request.size)

        avatars, total = await avatar_repository.get_page(db, page_request)
        result: Page[AvatarResponse] = Page[AvatarResponse].build(
            [self._to_response(a) for a in avatars], page_request, total
        )
        log.debug(
            "avatars_found",
            count=len(result.content),
            page=result.page,
            total_pages=result.total_pages,
            total_elements=result.total_elements,
        )
        if not result.content:
            log.warning("no_avatars_found", page=page_request.page)
        return result

    async def upload_avatar(
        self,
        db: AsyncSession,
        student_id: int,
        filename: str | None,
        media_type: str | None,
        data: bytes,
    ) -> AvatarResponse:
        """학생 아바타를 저장합니다. 기존 아바타는 교체됩니다.

        Store a student's avatar, replacing any previous one.

        Raises:
            StudentNotFoundError: 학생이 없을 때 (Student not found)
            PayloadTooLargeError: 크기 초과 (Upload exceeds AVATAR_MAX_BYTES)
        """
        log.info("upload_avatar", student_id=student_id, size=len(data))
        if not await student_repository.exists(db, {"id": student_id}):
            raise StudentNotFoundError(student_id)
        if len(data) > settings.AVATAR_MAX_BYTES:
            raise PayloadTooLargeError(f"Avatar exceeds {settings.AVATAR_MAX_BYTES} bytes")

        fields: dict = {
            "file_path": f"avatars/{student_id}/{filename or 'avatar'}",
            "file_size": len(data),
            "media_type": media_type or DEFAULT_MEDIA_TYPE,
            "data": data,
        }
        existing: Avatar | None = await avatar_repository.get_by_student(db, student_id)
        if existing is not None:
            avatar: Avatar | None = await avatar_repository.update(db, existing.id, fields)
        else:
            avatar = await avatar_repository.create(db, {"student_id": student_id, **fields})
        return self._to_response(avatar)

    async def get_avatar_data(self, db: AsyncSession, avatar_id: int) -> tuple[bytes, str]:
        """아바타 원본 바이트와 MIME 타입 (Raw bytes and media type of an avatar)."""
        avatar: Avatar | None = await avatar_repository.get_by_id(db, avatar_id)
        if avatar is None:
            log.error("avatar_not_found", avatar_id=avatar_id)
            raise NotFoundError(f"Avatar not found with id: {avatar_id}")
        return avatar.data or b"", avatar.media_type


# 싱글턴 인스턴스 — Singleton instance
avatar_service: AvatarService = AvatarService()

"""아바타 레포지토리 — 아바타 조회/저장 쿼리.

Avatar Repository — Queries for avatars, including lookup by owning student.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.school import Avatar
from app.repositories.base import BaseRepository


class AvatarRepository(BaseRepository[Avatar]):
    """아바타 테이블 레포지토리 (Repository for the avatars table)."""

    def __init__(self) -> None:
        super().__init__(Avatar)

    async def get_by_student(self, db: AsyncSession, student_id: int) -> Avatar | None:
        result = await db.execute(select(Avatar).where(Avatar.student_id == student_id))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
avatar_repository: AvatarRepository = AvatarRepository()

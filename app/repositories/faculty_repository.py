"""학부 레포지토리 — 학부 CRUD 및 검색 쿼리.

Faculty Repository — CRUD and search queries for faculties.
"""

from typing import Sequence

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.school import Faculty
from app.repositories.base import BaseRepository


class FacultyRepository(BaseRepository[Faculty]):
    """학부 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the faculties table.
    """

    def __init__(self) -> None:
        super().__init__(Faculty)

    async def get_by_color(self, db: AsyncSession, color: str) -> Sequence[Faculty]:
        return await self.get_all(db, filters={"color": color})

    async def search_by_name_or_color(self, db: AsyncSession, term: str) -> Sequence[Faculty]:
        """이름 또는 색상이 대소문자 무시하고 일치하는 학부.

        Faculties whose name OR color equals ``term``, ignoring case.
        """
        lowered: str = term.lower()
        query: Select = (
            select(Faculty)
            .where(or_(func.lower(Faculty.name) == lowered, func.lower(Faculty.color) == lowered))
            .order_by(Faculty.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def get_names(self, db: AsyncSession) -> Sequence[str]:
        result = await db.execute(select(Faculty.name).order_by(Faculty.id))
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
faculty_repository: FacultyRepository = FacultyRepository()

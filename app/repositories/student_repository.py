"""학생 레포지토리 — 학생 조회/집계 쿼리.

Student Repository — CRUD and aggregate queries for students.
Extends BaseRepository with Student-specific database operations.
"""

from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.school import Student
from app.repositories.base import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """학생 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the students table.
    """

    def __init__(self) -> None:
        super().__init__(Student)

    async def get_by_age(self, db: AsyncSession, age: int) -> Sequence[Student]:
        return await self.get_all(db, filters={"age": age})

    async def get_by_age_between(
        self,
        db: AsyncSession,
        min_age: int,
        max_age: int,
    ) -> Sequence[Student]:
        """나이 범위(양 끝 포함)로 조회합니다 (Inclusive age range)."""
        query: Select = (
            select(Student)
            .where(Student.age.between(min_age, max_age))
            .order_by(Student.id)
        )
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_faculty(self, db: AsyncSession, faculty_id: int) -> Sequence[Student]:
        return await self.get_all(db, filters={"faculty_id": faculty_id})

    async def get_average_age(self, db: AsyncSession) -> float | None:
        """SQL AVG 로 평균 나이를 계산합니다. 학생이 없으면 None.

        Average age computed by the database; None when the table is empty.
        """
        value = (await db.execute(select(func.avg(Student.age)))).scalar()
        return float(value) if value is not None else None

    async def get_last(self, db: AsyncSession, limit: int = 5) -> Sequence[Student]:
        """id 내림차순으로 마지막 N명 (Last ``limit`` students, highest id first)."""
        result = await db.execute(select(Student).order_by(Student.id.desc()).limit(limit))
        return result.scalars().all()

    async def get_first(self, db: AsyncSession, limit: int) -> Sequence[Student]:
        """id 오름차순으로 처음 N명 (First ``limit`` students by id)."""
        result = await db.execute(select(Student).order_by(Student.id).limit(limit))
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
student_repository: StudentRepository = StudentRepository()

"""학부 서비스 — 학부 CRUD 및 검색 비즈니스 로직.

Faculty Service — Business logic for faculty CRUD and search.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.school import Faculty
from app.repositories.faculty_repository import faculty_repository
from app.repositories.student_repository import student_repository
from app.schemas.faculty import FacultyCreate, FacultyResponse, FacultyUpdate
from app.schemas.student import StudentResponse
from app.services.student_service import student_to_response
from app.utils.exceptions import FacultyNotFoundError
from app.utils.logging import get_logger

log = get_logger(__name__)


class FacultyService:
    """학부 관련 비즈니스 로직을 처리하는 서비스.

    Service handling faculty business logic.
    """

    def _to_response(self, faculty: Faculty) -> FacultyResponse:
        return FacultyResponse(id=faculty.id, name=faculty.name, color=faculty.color)

    def _not_found(self, faculty_id: int) -> FacultyNotFoundError:
        log.error("faculty_not_found", faculty_id=faculty_id)
        return FacultyNotFoundError(f"Faculty not found with id: {faculty_id}")

    async def create_faculty(self, db: AsyncSession, data: FacultyCreate) -> FacultyResponse:
        log.info("create_faculty", name=data.name, color=data.color)
        faculty: Faculty = await faculty_repository.create(db, data.model_dump())
        log.info("faculty_created", faculty_id=faculty.id)
        return self._to_response(faculty)

    async def get_faculty(self, db: AsyncSession, faculty_id: int) -> FacultyResponse:
        """학부를 조회합니다.

        Retrieve a faculty by id.

        Raises:
            FacultyNotFoundError: 학부를 찾을 수 없을 때 (Faculty not found)
        """
        faculty: Faculty | None = await faculty_repository.get_by_id(db, faculty_id)
        if faculty is None:
            raise self._not_found(faculty_id)
        return self._to_response(faculty)

    async def update_faculty(
        self,
        db: AsyncSession,
        faculty_id: int,
        data: FacultyUpdate,
    ) -> FacultyResponse:
        log.info("update_faculty", faculty_id=faculty_id)
        faculty: Faculty | None = await faculty_repository.update(db, faculty_id, data.model_dump())
        if faculty is None:
            raise self._not_found(faculty_id)
        return self._to_response(faculty)

    async def delete_faculty(self, db: AsyncSession, faculty_id: int) -> FacultyResponse:
        """학부를 삭제합니다. 소속 학생은 남고 학부만 해제됩니다.

        Delete a faculty and return it. Its students stay, detached.
        """
        log.info("delete_faculty", faculty_id=faculty_id)
        faculty: Faculty | None = await faculty_repository.delete(db, faculty_id)
        if faculty is None:
            raise self._not_found(faculty_id)
        log.debug("faculty_deleted", faculty_id=faculty_id, name=faculty.name, color=faculty.color)
        return self._to_response(faculty)

    async def list_faculties(self, db: AsyncSession) -> list[FacultyResponse]:
        faculties = await faculty_repository.get_all(db)
        return [self._to_response(f) for f in faculties]

    async def list_by_color(self, db: AsyncSession, color: str) -> list[FacultyResponse]:
        faculties = await faculty_repository.get_by_color(db, color)
        log.debug("list_faculties_by_color", color=color, count=len(faculties))
        return [self._to_response(f) for f in faculties]

    async def search(self, db: AsyncSession, name_or_color: str) -> list[FacultyResponse]:
        faculties = await faculty_repository.search_by_name_or_color(db, name_or_color)
        log.debug("search_faculties", term=name_or_color, count=len(faculties))
        return [self._to_response(f) for f in faculties]

    async def list_students(self, db: AsyncSession, faculty_id: int) -> list[StudentResponse]:
        """학부 소속 학생 목록.

        Students of a faculty.

        Raises:
            FacultyNotFoundError: 학부를 찾을 수 없을 때 (Faculty not found)
        """
        if not await faculty_repository.exists(db, {"id": faculty_id}):
            raise self._not_found(faculty_id)
        students = await student_repository.get_by_faculty(db, faculty_id)
        return [student_to_response(s) for s in students]

    async def get_longest_name(self, db: AsyncSession) -> str:
        """가장 긴 학부 이름. 학부가 없으면 빈 문자열.

        Longest faculty name; the first one wins a tie, "" when there are none.
        """
        names = await faculty_repository.get_names(db)
        return max(names, key=len, default="")


# 싱글턴 인스턴스 — Singleton instance
faculty_service: FacultyService = FacultyService()

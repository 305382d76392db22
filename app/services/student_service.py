"""학생 서비스 — 학생 CRUD, 집계 및 출력 데모 비즈니스 로직.

Student Service — Business logic for student CRUD, aggregate queries
and the parallel/synchronized printing demonstration.
"""

import threading
from collections.abc import Callable

import anyio
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.school import Faculty, Student
from app.repositories.faculty_repository import faculty_repository
from app.repositories.student_repository import student_repository
from app.schemas.common import PrintResultResponse
from app.schemas.faculty import FacultyResponse
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.utils.concurrent_printer import ConcurrentPrinter, NamedItem, PrintReport, PrintStatus
from app.utils.exceptions import BadRequestError, FacultyNotFoundError, StudentNotFoundError
from app.utils.logging import get_logger

log = get_logger(__name__)

# 이름 첫 글자 — 라틴 A 와 키릴 А 모두 허용 (Latin "A" and Cyrillic "А")
_A_LETTERS: tuple[str, ...] = ("A", "А")

_PRINT_MESSAGES: dict[PrintStatus, str] = {
    PrintStatus.COMPLETED: "{title} printing completed. Check console for output.",
    PrintStatus.SKIPPED: "Not enough students in database. Need at least {required} for {mode} printing.",
    PrintStatus.INTERRUPTED: "{title} printing was interrupted; output may be incomplete.",
}


def student_to_response(student: Student) -> StudentResponse:
    """학생 모델을 응답 스키마로 변환합니다 (Convert a Student model to its response schema)."""
    return StudentResponse(
        id=student.id,
        name=student.name,
        age=student.age,
        faculty_id=student.faculty_id,
    )


class StudentService:
    """학생 관련 비즈니스 로직을 처리하는 서비스.

    Service handling student business logic.

    Args:
        printer: 출력 데모용 프린터 (Printer used by the print endpoints;
                 built from settings when omitted)
    """

    def __init__(self, printer: ConcurrentPrinter | None = None) -> None:
        self.printer: ConcurrentPrinter = printer or ConcurrentPrinter(
            worker_count=settings.PRINT_WORKER_COUNT,
            head_count=settings.PRINT_HEAD_COUNT,
            batch_size=settings.PRINT_BATCH_SIZE,
        )

    async def _get_student(self, db: AsyncSession, student_id: int) -> Student:
        student: Student | None = await student_repository.get_by_id(db, student_id)
        if student is None:
            log.error("student_not_found", student_id=student_id)
            raise StudentNotFoundError(student_id)
        return student

    async def _check_faculty(self, db: AsyncSession, faculty_id: int | None) -> None:
        if faculty_id is None:
            return
        if not await faculty_repository.exists(db, {"id": faculty_id}):
            log.error("faculty_not_found", faculty_id=faculty_id)
            raise FacultyNotFoundError(f"Faculty not found with id: {faculty_id}")

    async def create_student(self, db: AsyncSession, data: StudentCreate) -> StudentResponse:
        """새 학생을 생성합니다.

        Create a new student.

        Raises:
            FacultyNotFoundError: faculty_id 가 존재하지 않을 때 (Unknown faculty_id)
        """
        log.info("create_student", name=data.name, age=data.age)
        await self._check_faculty(db, data.faculty_id)

        student: Student = await student_repository.create(db, data.model_dump())
        log.info("student_created", student_id=student.id)
        return student_to_response(student)

    async def get_student(self, db: AsyncSession, student_id: int) -> StudentResponse:
        log.info("get_student", student_id=student_id)
        return student_to_response(await self._get_student(db, student_id))

    async def update_student(
        self,
        db: AsyncSession,
        student_id: int,
        data: StudentUpdate,
    ) -> StudentResponse:
        """학생 정보를 교체합니다.

        Replace a student's name, age and faculty. A null faculty_id
        detaches the student.

        Raises:
            StudentNotFoundError: 학생이 없을 때 (Student not found)
            FacultyNotFoundError: faculty_id 가 존재하지 않을 때 (Unknown faculty_id)
        """
        log.info("update_student", student_id=student_id)
        await self._get_student(db, student_id)
        await self._check_faculty(db, data.faculty_id)

        student: Student | None = await student_repository.update(db, student_id, data.model_dump())
        if student is None:
            raise StudentNotFoundError(student_id)
        log.info("student_updated", student_id=student_id)
        return student_to_response(student)

    async def delete_student(self, db: AsyncSession, student_id: int) -> StudentResponse:
        """학생을 삭제하고 삭제된 학생을 반환합니다.

        Delete a student and return what was deleted.
        """
        log.info("delete_student", student_id=student_id)
        student: Student | None = await student_repository.delete(db, student_id)
        if student is None:
            log.error("student_not_found", student_id=student_id)
            raise StudentNotFoundError(student_id)
        log.debug("student_deleted", student_id=student_id, name=student.name, age=student.age)
        return student_to_response(student)

    async def list_students(self, db: AsyncSession) -> list[StudentResponse]:
        students = await student_repository.get_all(db)
        log.debug("list_students", count=len(students))
        return [student_to_response(s) for s in students]

    async def list_by_age(self, db: AsyncSession, age: int) -> list[StudentResponse]:
        students = await student_repository.get_by_age(db, age)
        log.debug("list_students_by_age", age=age, count=len(students))
        return [student_to_response(s) for s in students]

    async def list_by_age_between(
        self,
        db: AsyncSession,
        min_age: int,
        max_age: int,
    ) -> list[StudentResponse]:
        """나이 범위(양 끝 포함)로 학생을 조회합니다.

        List students with min_age <= age <= max_age.

        Raises:
            BadRequestError: min_age > max_age 일 때 (Inverted range)
        """
        if min_age > max_age:
            raise BadRequestError("min must not be greater than max")
        students = await student_repository.get_by_age_between(db, min_age, max_age)
        log.debug("list_students_by_age_between", min=min_age, max=max_age, count=len(students))
        return [student_to_response(s) for s in students]

    async def get_student_faculty(self, db: AsyncSession, student_id: int) -> FacultyResponse:
        """학생의 학부를 조회합니다.

        Return the faculty of a student.

        Raises:
            StudentNotFoundError: 학생이 없을 때
            FacultyNotFoundError: 학생에게 학부가 없을 때 (Student has no faculty)
        """
        student: Student = await self._get_student(db, student_id)
        faculty: Faculty | None = None
        if student.faculty_id is not None:
            faculty = await faculty_repository.get_by_id(db, student.faculty_id)
        if faculty is None:
            log.warning("student_without_faculty", student_id=student_id)
            raise FacultyNotFoundError(f"Student with id {student_id} doesn't have a faculty")
        return FacultyResponse(id=faculty.id, name=faculty.name, color=faculty.color)

    # === 집계 (Aggregates) ===

    async def count_students(self, db: AsyncSession) -> int:
        count: int = await student_repository.count(db)
        log.debug("count_students", count=count)
        return count

    async def get_average_age(self, db: AsyncSession) -> float | None:
        average: float | None = await student_repository.get_average_age(db)
        if average is None:
            log.warning("average_age_empty")
        return average

    async def get_average_age_all(self, db: AsyncSession) -> float:
        """전체 학생을 읽어 파이썬에서 평균을 계산합니다. 없으면 0.0.

        Average age computed in Python over all rows; 0.0 when empty.
        """
        students = await student_repository.get_all(db)
        if not students:
            log.warning("no_students_found")
            return 0.0
        return sum(s.age for s in students) / len(students)

    async def get_last_five(self, db: AsyncSession) -> list[StudentResponse]:
        students = await student_repository.get_last(db, 5)
        return [student_to_response(s) for s in students]

    async def get_names_starting_with_a(self, db: AsyncSession) -> list[str]:
        """'A' 로 시작하는 이름을 대문자로 정렬해 반환합니다.

        Upper-cased names starting with "A" (Latin or Cyrillic), sorted.
        """
        students = await student_repository.get_all(db)
        names: list[str] = sorted(
            s.name.upper() for s in students if s.name and s.name.upper().startswith(_A_LETTERS)
        )
        log.debug("names_starting_with_a", count=len(names))
        return names

    # === 출력 데모 (Printing demonstration) ===

    async def _load_print_items(self, db: AsyncSession) -> list[NamedItem]:
        students = await student_repository.get_first(db, self.printer.required)
        # 스레드로 넘기기 전에 ORM 객체를 불변 값으로 복사 — threads only see plain values
        return [NamedItem(id=s.id, name=s.name) for s in students]

    def _to_result(self, mode: str, report: PrintReport) -> PrintResultResponse:
        message: str = _PRINT_MESSAGES[report.status].format(
            title=mode.capitalize(), mode=mode, required=report.required
        )
        return PrintResultResponse(
            status=report.status,
            printed=report.printed,
            required=report.required,
            message=message,
        )

    async def _run_printer(
        self,
        print_fn: Callable[[list[NamedItem], threading.Event], PrintReport],
        items: list[NamedItem],
    ) -> PrintReport:
        """출력을 스레드풀에서 실행합니다. 요청이 취소되면 join 도 취소됩니다.

        Run a blocking print call off the event loop. If the awaiting request
        is cancelled, the worker thread is abandoned and the per-request
        cancel event is set, so its join returns ``interrupted`` instead of
        blocking.
        """
        cancel = threading.Event()
        try:
            return await anyio.to_thread.run_sync(print_fn, items, cancel, abandon_on_cancel=True)
        finally:
            cancel.set()

    async def print_students_parallel(self, db: AsyncSession) -> PrintResultResponse:
        """첫 학생들을 병렬로 출력합니다.

        Print the first students with the parallel printer.
        The blocking join runs in a worker thread, off the event loop.
        """
        log.info("print_students_parallel")
        items: list[NamedItem] = await self._load_print_items(db)
        report: PrintReport = await self._run_printer(self.printer.print_parallel, items)
        return self._to_result("parallel", report)

    async def print_students_synchronized(self, db: AsyncSession) -> PrintResultResponse:
        """첫 학생들을 잠금으로 직렬화하여 출력합니다.

        Print the first students with every line serialized by one lock.
        """
        log.info("print_students_synchronized")
        items: list[NamedItem] = await self._load_print_items(db)
        report: PrintReport = await self._run_printer(self.printer.print_synchronized, items)
        return self._to_result("synchronized", report)


# 싱글턴 인스턴스 — Singleton instance
student_service: StudentService = StudentService()

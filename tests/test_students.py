"""학생 API 테스트.

Student API tests — CRUD, aggregates and the printing demonstration.
"""

import asyncio
import threading

import pytest
from httpx import AsyncClient

from app.services.student_service import StudentService, student_service
from app.utils.concurrent_printer import ConcurrentPrinter, PrintReport, PrintStatus

URL = "/student"


class TestStudentCreate:
    """학생 생성 테스트."""

    async def test_create_student(self, client: AsyncClient, faculty):
        res = await client.post(URL, json={"name": "Ginny Weasley", "age": 16, "faculty_id": faculty.id})
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Ginny Weasley"
        assert data["age"] == 16
        assert data["faculty_id"] == faculty.id
        assert isinstance(data["id"], int)

    async def test_create_student_without_faculty(self, client: AsyncClient):
        res = await client.post(URL, json={"name": "Cedric", "age": 17})
        assert res.status_code == 201
        assert res.json()["faculty_id"] is None

    async def test_create_student_unknown_faculty(self, client: AsyncClient):
        """존재하지 않는 학부로 생성 시 404."""
        res = await client.post(URL, json={"name": "Nobody", "age": 11, "faculty_id": 999})
        assert res.status_code == 404
        assert res.json()["detail"] == "Faculty not found with id: 999"

    async def test_create_student_invalid_body(self, client: AsyncClient):
        res = await client.post(URL, json={"name": "", "age": -1})
        assert res.status_code == 422


class TestStudentRead:
    """학생 조회 테스트."""

    async def test_get_student(self, client: AsyncClient, student):
        res = await client.get(f"{URL}/{student.id}")
        assert res.status_code == 200
        assert res.json()["name"] == "Harry Potter"

    async def test_get_nonexistent_student(self, client: AsyncClient):
        res = await client.get(f"{URL}/12345")
        assert res.status_code == 404
        assert res.json()["detail"] == "Student not found with id: 12345"

    async def test_list_students(self, client: AsyncClient, six_students):
        res = await client.get(URL)
        assert res.status_code == 200
        assert [s["name"] for s in res.json()] == [s.name for s in six_students]

    async def test_by_age(self, client: AsyncClient, six_students):
        res = await client.get(f"{URL}/age", params={"age": 16})
        assert res.status_code == 200
        assert sorted(s["name"] for s in res.json()) == ["Luna Lovegood", "Neville Longbottom"]

    async def test_by_age_between_is_inclusive(self, client: AsyncClient, six_students):
        res = await client.get(f"{URL}/age-between", params={"min": 17, "max": 18})
        assert res.status_code == 200
        assert len(res.json()) == 4

    async def test_by_age_between_inverted_range(self, client: AsyncClient):
        res = await client.get(f"{URL}/age-between", params={"min": 20, "max": 10})
        assert res.status_code == 400

    async def test_student_faculty(self, client: AsyncClient, student, faculty):
        res = await client.get(f"{URL}/{student.id}/faculty")
        assert res.status_code == 200
        assert res.json() == {"id": faculty.id, "name": "Gryffindor", "color": "Red"}

    async def test_student_without_faculty(self, client: AsyncClient):
        created = (await client.post(URL, json={"name": "Loner", "age": 12})).json()
        res = await client.get(f"{URL}/{created['id']}/faculty")
        assert res.status_code == 404
        assert "doesn't have a faculty" in res.json()["detail"]


class TestStudentUpdate:
    """학생 수정 테스트."""

    async def test_update_student(self, client: AsyncClient, student, other_faculty):
        res = await client.put(
            f"{URL}/{student.id}",
            json={"name": "Harry J. Potter", "age": 18, "faculty_id": other_faculty.id},
        )
        assert res.status_code == 200
        data = res.json()
        assert data["name"] == "Harry J. Potter"
        assert data["age"] == 18
        assert data["faculty_id"] == other_faculty.id

    async def test_update_without_faculty_detaches(self, client: AsyncClient, student):
        res = await client.put(f"{URL}/{student.id}", json={"name": "Harry", "age": 17})
        assert res.status_code == 200
        assert res.json()["faculty_id"] is None

    async def test_update_unknown_faculty(self, client: AsyncClient, student):
        res = await client.put(f"{URL}/{student.id}", json={"name": "Harry", "age": 17, "faculty_id": 404})
        assert res.status_code == 404

    async def test_update_nonexistent_student(self, client: AsyncClient):
        res = await client.put(f"{URL}/999", json={"name": "X", "age": 1})
        assert res.status_code == 404


class TestStudentDelete:
    """학생 삭제 테스트."""

    async def test_delete_returns_deleted_student(self, client: AsyncClient, student):
        res = await client.delete(f"{URL}/{student.id}")
        assert res.status_code == 200
        assert res.json()["name"] == "Harry Potter"

        res2 = await client.get(f"{URL}/{student.id}")
        assert res2.status_code == 404

    async def test_delete_nonexistent_student(self, client: AsyncClient):
        res = await client.delete(f"{URL}/999")
        assert res.status_code == 404


class TestStudentAggregates:
    """집계 엔드포인트 테스트."""

    async def test_count(self, client: AsyncClient, six_students):
        res = await client.get(f"{URL}/count")
        assert res.json() == {"count": 6}

    async def test_average_age(self, client: AsyncClient, six_students):
        res = await client.get(f"{URL}/average-age")
        assert res.json()["average_age"] == (17 + 17 + 18 + 17 + 16 + 16) / 6

    async def test_average_age_empty_is_null(self, client: AsyncClient):
        res = await client.get(f"{URL}/average-age")
        assert res.json() == {"average_age": None}

    async def test_average_age_all_empty_is_zero(self, client: AsyncClient):
        res = await client.get(f"{URL}/average-age-all")
        assert res.json() == {"average_age": 0.0}

    async def test_average_age_all(self, client: AsyncClient, six_students):
        res = await client.get(f"{URL}/average-age-all")
        assert res.json()["average_age"] == (17 + 17 + 18 + 17 + 16 + 16) / 6

    async def test_last_five(self, client: AsyncClient, six_students):
        res = await client.get(f"{URL}/last-five")
        ids = [s["id"] for s in res.json()]
        assert ids == sorted((s.id for s in six_students), reverse=True)[:5]

    async def test_names_starting_with_a(self, client: AsyncClient):
        for name in ["anna", "Boris", "Albus", "Александр"]:
            await client.post(URL, json={"name": name, "age": 20})
        res = await client.get(f"{URL}/names-starting-with-a")
        assert res.json() == ["ALBUS", "ANNA", "АЛЕКСАНДР"]


class TestStudentPrinting:
    """출력 데모 엔드포인트 테스트."""

    async def test_print_parallel(self, client: AsyncClient, six_students, monkeypatch):
        lines: list[str] = []
        monkeypatch.setattr(student_service, "printer", ConcurrentPrinter(write=lines.append))

        res = await client.get(f"{URL}/print-parallel")
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "completed"
        assert data["printed"] == 6
        assert data["message"] == "Parallel printing completed. Check console for output."
        assert lines[:2] == ["Main thread - Student 1: Harry Potter", "Main thread - Student 2: Ron Weasley"]
        assert len(lines) == 6

    async def test_print_synchronized(self, client: AsyncClient, six_students, monkeypatch):
        lines: list[str] = []
        monkeypatch.setattr(student_service, "printer", ConcurrentPrinter(write=lines.append))

        res = await client.get(f"{URL}/print-synchronized")
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "completed"
        assert data["message"] == "Synchronized printing completed. Check console for output."
        assert len(lines) == 6

    async def test_print_skipped_with_too_few_students(self, client: AsyncClient, student, monkeypatch):
        lines: list[str] = []
        monkeypatch.setattr(student_service, "printer", ConcurrentPrinter(write=lines.append))

        res = await client.get(f"{URL}/print-parallel")
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "skipped"
        assert data["printed"] == 0
        assert data["required"] == 6
        assert "Need at least 6" in data["message"]
        assert lines == []

    async def test_print_with_failing_sink_still_responds(self, client: AsyncClient, six_students, monkeypatch):
        lines: list[str] = []

        def sink(line: str) -> None:
            if "Student 1:" in line:
                raise OSError("stdout closed")
            lines.append(line)

        monkeypatch.setattr(student_service, "printer", ConcurrentPrinter(write=sink))

        res = await client.get(f"{URL}/print-parallel")
        assert res.status_code == 200
        data = res.json()
        assert data["status"] == "completed"
        assert data["printed"] == 4
        assert len(lines) == 4


class RecordingPrinter(ConcurrentPrinter):
    """스레드에서 돌아온 보고서를 기록하는 프린터."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.reports: list[PrintReport] = []
        self.done = threading.Event()

    def print_parallel(self, items, cancel=None) -> PrintReport:
        report = super().print_parallel(items, cancel)
        self.reports.append(report)
        self.done.set()
        return report


class TestStudentPrintingCancellation:
    """요청 취소 시 출력 join 취소."""

    async def test_cancelled_request_interrupts_printer(self, db, six_students):
        gate = threading.Event()
        worker_started = threading.Event()

        def sink(line: str) -> None:
            if line.startswith("Thread"):
                worker_started.set()
                gate.wait(5)

        printer = RecordingPrinter(write=sink, poll_interval=0.01)
        service = StudentService(printer=printer)
        task = asyncio.create_task(service.print_students_parallel(db))

        for _ in range(500):
            if worker_started.is_set():
                break
            await asyncio.sleep(0.01)
        assert worker_started.is_set()

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # 스레드는 join 에서 풀려나 interrupted 를 보고
        try:
            assert printer.done.wait(5)
            assert printer.reports[0].status is PrintStatus.INTERRUPTED
            assert printer.reports[0].printed == 2
        finally:
            gate.set()

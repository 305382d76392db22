"""학생 라우터 — 학생 CRUD, 집계 및 출력 데모 엔드포인트.

Student Router — CRUD, aggregate and printing demonstration endpoints.
Static paths are registered before ``/{student_id}`` so they are not
captured by the id route.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import PrintResultResponse
from app.schemas.faculty import FacultyResponse
from app.schemas.student import (
    AverageAgeResponse,
    CountResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)
from app.services.student_service import student_service

router: APIRouter = APIRouter()


@router.post("", response_model=StudentResponse, status_code=201)
async def create_student(
    data: StudentCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """새 학생을 생성합니다.

    Create a new student, optionally attached to a faculty.
    """
    result: StudentResponse = await student_service.create_student(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[StudentResponse])
async def list_students(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[StudentResponse]:
    return await student_service.list_students(db)


@router.get("/age", response_model=list[StudentResponse])
async def list_students_by_age(
    db: Annotated[AsyncSession, Depends(get_db)],
    age: Annotated[int, Query(description="정확한 나이 (Exact age)")],
) -> list[StudentResponse]:
    return await student_service.list_by_age(db, age)


@router.get("/age-between", response_model=list[StudentResponse])
async def list_students_by_age_between(
    db: Annotated[AsyncSession, Depends(get_db)],
    min_age: Annotated[int, Query(alias="min", description="최소 나이 (inclusive)")],
    max_age: Annotated[int, Query(alias="max", description="최대 나이 (inclusive)")],
) -> list[StudentResponse]:
    """나이 범위로 학생을 조회합니다 (양 끝 포함).

    List students whose age lies in [min, max].
    """
    return await student_service.list_by_age_between(db, min_age, max_age)


@router.get("/count", response_model=CountResponse)
async def count_students(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CountResponse:
    return CountResponse(count=await student_service.count_students(db))


@router.get("/average-age", response_model=AverageAgeResponse)
async def get_average_age(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AverageAgeResponse:
    """DB 집계로 계산한 평균 나이 (Average age from SQL AVG, null when empty)."""
    return AverageAgeResponse(average_age=await student_service.get_average_age(db))


@router.get("/average-age-all", response_model=AverageAgeResponse)
async def get_average_age_all(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AverageAgeResponse:
    """전체 조회 후 계산한 평균 나이 (Average over all rows, 0.0 when empty)."""
    return AverageAgeResponse(average_age=await student_service.get_average_age_all(db))


@router.get("/last-five", response_model=list[StudentResponse])
async def get_last_five_students(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[StudentResponse]:
    return await student_service.get_last_five(db)


@router.get("/names-starting-with-a", response_model=list[str])
async def get_names_starting_with_a(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[str]:
    return await student_service.get_names_starting_with_a(db)


@router.get("/print-parallel", response_model=PrintResultResponse)
async def print_students_parallel(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PrintResultResponse:
    """첫 6명의 학생 이름을 메인 스레드와 워커 2개로 출력합니다.

    Print the first six student names from the calling thread and two
    workers. Output goes to the server console.
    """
    return await student_service.print_students_parallel(db)


@router.get("/print-synchronized", response_model=PrintResultResponse)
async def print_students_synchronized(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PrintResultResponse:
    """병렬 출력과 같지만 각 줄을 하나의 잠금으로 직렬화합니다.

    Same as print-parallel, with every line serialized by a single lock.
    """
    return await student_service.print_students_synchronized(db)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    return await student_service.get_student(db, student_id)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    data: StudentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """학생 정보를 교체합니다.

    Replace a student's data. A null faculty_id detaches the student.
    """
    result: StudentResponse = await student_service.update_student(db, student_id, data)
    await db.commit()
    return result


@router.delete("/{student_id}", response_model=StudentResponse)
async def delete_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """학생을 삭제하고 삭제된 학생을 반환합니다.

    Delete a student and return the deleted record.
    """
    result: StudentResponse = await student_service.delete_student(db, student_id)
    await db.commit()
    return result


@router.get("/{student_id}/faculty", response_model=FacultyResponse)
async def get_student_faculty(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FacultyResponse:
    return await student_service.get_student_faculty(db, student_id)

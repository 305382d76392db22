"""학부 라우터 — 학부 CRUD 및 검색 엔드포인트.

Faculty Router — CRUD and search endpoints for faculties.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.faculty import FacultyCreate, FacultyResponse, FacultyUpdate
from app.schemas.student import StudentResponse
from app.services.faculty_service import faculty_service

router: APIRouter = APIRouter()


@router.post("", response_model=FacultyResponse, status_code=201)
async def create_faculty(
    data: FacultyCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FacultyResponse:
    result: FacultyResponse = await faculty_service.create_faculty(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[FacultyResponse])
async def list_faculties(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[FacultyResponse]:
    return await faculty_service.list_faculties(db)


@router.get("/color", response_model=list[FacultyResponse])
async def list_faculties_by_color(
    db: Annotated[AsyncSession, Depends(get_db)],
    color: Annotated[str, Query(description="학부 색상 (Exact color)")],
) -> list[FacultyResponse]:
    return await faculty_service.list_by_color(db, color)


@router.get("/search", response_model=list[FacultyResponse])
async def search_faculties(
    db: Annotated[AsyncSession, Depends(get_db)],
    name_or_color: Annotated[str, Query(description="이름 또는 색상, 대소문자 무시 (Name or color, case-insensitive)")],
) -> list[FacultyResponse]:
    return await faculty_service.search(db, name_or_color)


@router.get("/longest-name", response_model=str)
async def get_longest_faculty_name(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> str:
    """가장 긴 학부 이름 (Longest faculty name, "" when there are none)."""
    return await faculty_service.get_longest_name(db)


@router.get("/{faculty_id}", response_model=FacultyResponse)
async def get_faculty(
    faculty_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FacultyResponse:
    return await faculty_service.get_faculty(db, faculty_id)


@router.put("/{faculty_id}", response_model=FacultyResponse)
async def update_faculty(
    faculty_id: int,
    data: FacultyUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FacultyResponse:
    result: FacultyResponse = await faculty_service.update_faculty(db, faculty_id, data)
    await db.commit()
    return result


@router.delete("/{faculty_id}", response_model=FacultyResponse)
async def delete_faculty(
    faculty_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FacultyResponse:
    """학부를 삭제합니다. 소속 학생은 학부 없이 남습니다.

    Delete a faculty; its students remain without a faculty.
    """
    result: FacultyResponse = await faculty_service.delete_faculty(db, faculty_id)
    await db.commit()
    return result


@router.get("/{faculty_id}/students", response_model=list[StudentResponse])
async def list_faculty_students(
    faculty_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[StudentResponse]:
    return await faculty_service.list_students(db, faculty_id)

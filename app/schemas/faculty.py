"""학부 관련 Pydantic 요청/응답 스키마 정의.

Faculty Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, Field


class FacultyCreate(BaseModel):
    """학부 생성 요청 스키마.

    Faculty creation request schema.

    Attributes:
        name: 학부 이름 (Faculty name)
        color: 학부 색상 (Faculty color)
    """

    name: str = Field(min_length=1, max_length=255)
    color: str = Field(min_length=1, max_length=64)


class FacultyUpdate(FacultyCreate):
    """학부 수정 요청 스키마 (전체 교체, full replacement)."""


class FacultyResponse(BaseModel):
    """학부 응답 스키마 (Faculty response schema)."""

    id: int
    name: str
    color: str

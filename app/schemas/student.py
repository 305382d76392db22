"""학생 관련 Pydantic 요청/응답 스키마 정의.

Student Pydantic request/response schema definitions.
Covers CRUD and the aggregate endpoints under /student.
"""

from pydantic import BaseModel, Field


class StudentCreate(BaseModel):
    """학생 생성 요청 스키마.

    Student creation request schema.

    Attributes:
        name: 학생 이름 (Student name)
        age: 나이 (Age in years)
        faculty_id: 소속 학부 ID (Faculty to attach, optional)
    """

    name: str = Field(min_length=1, max_length=255)
    age: int = Field(ge=0)
    faculty_id: int | None = None  # 없으면 학부 미지정 (No faculty when omitted)


class StudentUpdate(StudentCreate):
    """학생 수정 요청 스키마 (전체 교체).

    Student update request schema. This is a full replacement:
    an omitted or null faculty_id detaches the student from its faculty.
    """


class StudentResponse(BaseModel):
    """학생 응답 스키마.

    Student response schema returned from API.
    """

    id: int
    name: str
    age: int
    faculty_id: int | None


class AverageAgeResponse(BaseModel):
    """평균 나이 응답 — 학생이 없으면 null (Average age, null when there are no students)."""

    average_age: float | None


class CountResponse(BaseModel):
    count: int

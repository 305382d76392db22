"""학교 도메인 SQLAlchemy ORM 모델 정의.

School domain SQLAlchemy ORM model definitions.
Includes Faculty, Student and Avatar entities.

Tables:
    - faculties: 학부 (Faculty / house)
    - students: 학생 (Student, optionally attached to one faculty)
    - avatars: 학생 아바타 이미지 (One avatar per student)
"""

from sqlalchemy import ForeignKey, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Faculty(Base):
    """학부 모델.

    Faculty model. Deleting a faculty detaches its students
    (their faculty_id becomes NULL) instead of deleting them.

    Relationships:
        students: 소속 학생 목록 (Students attached to this faculty)
    """

    __tablename__ = "faculties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(String(64), nullable=False)

    students = relationship("Student", back_populates="faculty")


class Student(Base):
    """학생 모델.

    Student model. Age is an integer number of years.
    """

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    # 소속 학부 FK — 학부 삭제 시 NULL (Faculty FK, nulled when the faculty is deleted)
    faculty_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("faculties.id", ondelete="SET NULL"), nullable=True
    )

    faculty = relationship("Faculty", back_populates="students")
    # 학생 삭제 시 아바타도 삭제 (Avatar goes away with its student)
    avatar = relationship("Avatar", back_populates="student", uselist=False, cascade="all, delete-orphan")


class Avatar(Base):
    """아바타 모델 — 이미지 바이트는 DB에 저장.

    Avatar model. Image bytes live in ``data`` and are never serialized
    in list responses.
    """

    __tablename__ = "avatars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    file_path: Mapped[str] = mapped_column(String(512), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    media_type: Mapped[str] = mapped_column(String(255), nullable=False)
    data: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    student_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("students.id", ondelete="CASCADE"), unique=True, nullable=False
    )

    student = relationship("Student", back_populates="avatar")

"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata used
by ``create_tables``.

Modules:
    school: 학부, 학생, 아바타 (Faculty, Student, Avatar)
"""

from app.models.school import Avatar, Faculty, Student

__all__ = ["Faculty", "Student", "Avatar"]

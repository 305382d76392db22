"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client fixtures.
Each test gets a fresh engine, so no data leaks between tests.
"""

import os

# app 임포트 전에 설정 — must be set before app.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DEBUG"] = "false"
os.environ["CREATE_TABLES"] = "false"
os.environ["AXIOM_API_TOKEN"] = ""
os.environ["AXIOM_DATASET"] = ""

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import create_tables, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Avatar, Faculty, Student  # noqa: E402

STUDENT_NAMES: list[tuple[str, int]] = [
    ("Harry Potter", 17),
    ("Ron Weasley", 17),
    ("Hermione Granger", 18),
    ("Draco Malfoy", 17),
    ("Neville Longbottom", 16),
    ("Luna Lovegood", 16),
]


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 인메모리 엔진. StaticPool 로 하나의 연결을 공유합니다."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def faculty(db: AsyncSession) -> Faculty:
    """테스트 학부를 생성합니다."""
    f = Faculty(name="Gryffindor", color="Red")
    db.add(f)
    await db.flush()
    await db.refresh(f)
    await db.commit()
    return f


@pytest_asyncio.fixture
async def other_faculty(db: AsyncSession) -> Faculty:
    f = Faculty(name="Ravenclaw", color="Blue")
    db.add(f)
    await db.flush()
    await db.refresh(f)
    await db.commit()
    return f


@pytest_asyncio.fixture
async def student(db: AsyncSession, faculty: Faculty) -> Student:
    """학부에 소속된 학생 한 명을 생성합니다."""
    s = Student(name="Harry Potter", age=17, faculty_id=faculty.id)
    db.add(s)
    await db.flush()
    await db.refresh(s)
    await db.commit()
    return s


@pytest_asyncio.fixture
async def six_students(db: AsyncSession, faculty: Faculty) -> list[Student]:
    """출력 데모용 학생 6명을 id 순서대로 생성합니다."""
    result: list[Student] = []
    for name, age in STUDENT_NAMES:
        s = Student(name=name, age=age, faculty_id=faculty.id)
        db.add(s)
        await db.flush()
        await db.refresh(s)
        result.append(s)
    await db.commit()
    return result


async def make_avatar(db: AsyncSession, student: Student, name: str = "face.png") -> Avatar:
    """테스트용 아바타를 직접 저장합니다."""
    avatar = Avatar(
        student_id=student.id,
        file_path=f"avatars/{student.id}/{name}",
        file_size=3,
        media_type="image/png",
        data=b"png",
    )
    db.add(avatar)
    await db.flush()
    await db.refresh(avatar)
    await db.commit()
    return avatar

"""학교 API 라우터 패키지 — 모든 학교 엔드포인트 통합.

School API Router package — Aggregates all school-facing endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - students: 학생 관리 및 출력 데모 (Student management and print demo)
    - faculties: 학부 관리 (Faculty management)
    - avatars: 아바타 목록/업로드 (Avatar listing and upload)
    - math: 합계 계산 비교 (Sum computation comparison)
    - info: 서버 정보 (Server information)
"""

from fastapi import APIRouter

from app.api.school.avatars import router as avatars_router
from app.api.school.faculties import router as faculties_router
from app.api.school.info import router as info_router
from app.api.school.math import router as math_router
from app.api.school.students import router as students_router

school_router: APIRouter = APIRouter()

school_router.include_router(students_router, prefix="/student", tags=["Students"])
school_router.include_router(faculties_router, prefix="/faculty", tags=["Faculties"])
school_router.include_router(avatars_router, prefix="/avatar", tags=["Avatars"])
school_router.include_router(math_router, prefix="/math", tags=["Math"])
school_router.include_router(info_router, prefix="/info", tags=["Info"])

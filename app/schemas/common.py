"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared by several routers.
"""

from pydantic import BaseModel

from app.utils.concurrent_printer import PrintStatus


class PrintResultResponse(BaseModel):
    """출력 데모 결과 응답 스키마.

    Result of a /student/print-* call.

    Attributes:
        status: completed / skipped / interrupted
        printed: 실제 출력된 줄 수 (Lines actually printed)
        required: 필요한 최소 학생 수 (Students needed for a full run)
        message: 사람이 읽는 요약 (Human readable summary)
    """

    status: PrintStatus
    printed: int
    required: int
    message: str

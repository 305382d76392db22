"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
so services can raise them without specifying status codes at each call site.

Usage:
    from app.utils.exceptions import StudentNotFoundError
    raise StudentNotFoundError(student_id)
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (student, faculty, avatar) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StudentNotFoundError(NotFoundError):
    """학생을 찾을 수 없음 (Student with the given id does not exist)."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Student not found with id: {student_id}")


class FacultyNotFoundError(NotFoundError):
    """학부를 찾을 수 없음 (Faculty does not exist, or a student has none)."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. an inverted age range).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class PayloadTooLargeError(HTTPException):
    """413 예외 — 업로드 파일이 허용 크기를 초과할 때.

    413 Content Too Large, raised for oversized avatar uploads.
    """

    def __init__(self, detail: str = "Payload too large") -> None:
        super().__init__(status_code=413, detail=detail)

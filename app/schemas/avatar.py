"""아바타 관련 Pydantic 응답 스키마 정의.

Avatar Pydantic response schema definitions.
Image bytes are never part of these schemas; they are served raw
from /avatar/{id}/data.
"""

from pydantic import BaseModel


class AvatarResponse(BaseModel):
    """아바타 메타데이터 응답 스키마.

    Avatar metadata response schema.

    Attributes:
        id: 아바타 ID (Avatar identifier)
        file_path: 원본 파일 경로/이름 (Original file path or name)
        file_size: 바이트 단위 크기 (Size in bytes)
        media_type: MIME 타입 (Content type, e.g. image/png)
        student_id: 소유 학생 ID (Owning student)
    """

    id: int
    file_path: str
    file_size: int
    media_type: str
    student_id: int

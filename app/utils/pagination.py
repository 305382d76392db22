"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Normalizes raw page/size query parameters into a PageRequest, runs the
paged query, and wraps the result in a Page response model.
Pages are 0-based.
"""

import math
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")

DEFAULT_PAGE: int = 0
DEFAULT_SIZE: int = 10
MAX_SIZE: int = 100


class PageRequest(BaseModel):
    """정규화된 페이지 요청.

    Normalized (page, size) pair: page >= 0, 1 <= size <= MAX_SIZE.
    """

    model_config = {"frozen": True}

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE

    @property
    def offset(self) -> int:
        return self.page * self.size


def validate_page_request(page: int | None = None, size: int | None = None) -> PageRequest:
    """페이지/크기 파라미터를 정규화합니다. 거부하지 않고 항상 보정합니다.

    Normalize page and size; inputs are never rejected.

    - page absent or negative -> 0
    - size absent or <= 0 -> 10
    - size > 100 -> 100
    """
    valid_page: int = DEFAULT_PAGE if page is None or page < 0 else page
    if size is None or size <= 0:
        valid_size: int = DEFAULT_SIZE
    else:
        valid_size = min(size, MAX_SIZE)
    return PageRequest(page=valid_page, size=valid_size)


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        content: 현재 페이지 항목 목록 (Items for the current page)
        page: 현재 페이지 번호 — 0부터 시작 (Current page, 0-based)
        size: 요청된 페이지 크기 (Requested page size)
        total_elements: 전체 항목 수 (Total count across all pages)
        total_pages: 전체 페이지 수 (ceil(total_elements / size))
    """

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def build(cls, content: list[T], page_request: PageRequest, total: int) -> "Page[T]":
        return cls(
            content=content,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
            total_pages=math.ceil(total / page_request.size) if total else 0,
        )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page_request: 정규화된 페이지 요청 (Normalized page request)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(page_request.offset).limit(page_request.size))
    items: Sequence[Any] = result.scalars().all()

    return items, total

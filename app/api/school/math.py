"""수학 라우터 — 1..1,000,000 합계 계산 방식 비교.

Math Router — Sum of 1..1,000,000 computed four ways.
"""

from fastapi import APIRouter
from fastapi.concurrency import run_in_threadpool

from app.services.math_service import math_service

router: APIRouter = APIRouter()


@router.get("/sum-slow", response_model=int)
async def get_sum_slow() -> int:
    return await run_in_threadpool(math_service.sum_slow)


@router.get("/sum-formula", response_model=int)
async def get_sum_formula() -> int:
    return math_service.sum_formula()


@router.get("/sum-parallel", response_model=int)
async def get_sum_parallel() -> int:
    return await run_in_threadpool(math_service.sum_parallel)


@router.get("/sum-range", response_model=int)
async def get_sum_range() -> int:
    return await run_in_threadpool(math_service.sum_range)

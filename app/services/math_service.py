"""수학 서비스 — 1..N 합계를 네 가지 방식으로 계산.

Math Service — Sum of 1..N computed four ways, to compare their cost.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from itertools import count, islice
from operator import add

from app.utils.logging import get_logger

log = get_logger(__name__)

UPPER_BOUND: int = 1_000_000


class MathService:
    def __init__(self, n: int = UPPER_BOUND, chunks: int = 4) -> None:
        self.n: int = n
        self.chunks: int = chunks

    def sum_slow(self) -> int:
        """무한 이터레이터를 잘라 reduce 로 합산 (reduce over an unbounded counter)."""
        start = time.perf_counter()
        total: int = reduce(add, islice(count(1), self.n), 0)
        log.debug("sum_slow", took_ms=round((time.perf_counter() - start) * 1000, 2), sum=total)
        return total

    def sum_formula(self) -> int:
        total: int = self.n * (self.n + 1) // 2
        log.debug("sum_formula", sum=total)
        return total

    def sum_parallel(self) -> int:
        """구간을 나눠 스레드 풀에서 합산 (Chunked sums on a thread pool)."""
        start = time.perf_counter()
        step: int = -(-self.n // self.chunks)
        ranges = [range(lo, min(lo + step, self.n + 1)) for lo in range(1, self.n + 1, step)]
        with ThreadPoolExecutor(max_workers=self.chunks) as pool:
            total: int = sum(pool.map(sum, ranges))
        log.debug("sum_parallel", took_ms=round((time.perf_counter() - start) * 1000, 2), sum=total)
        return total

    def sum_range(self) -> int:
        start = time.perf_counter()
        total: int = sum(range(1, self.n + 1))
        log.debug("sum_range", took_ms=round((time.perf_counter() - start) * 1000, 2), sum=total)
        return total


# 싱글턴 인스턴스 — Singleton instance
math_service: MathService = MathService()

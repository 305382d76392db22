"""기타 엔드포인트 테스트.

Health, info, math endpoints and the request logging middleware.
"""

from httpx import AsyncClient

from app.middleware.axiom_logging import mask_sensitive
from app.utils.exceptions import PayloadTooLargeError

EXPECTED_SUM = 500_000_500_000


class TestHealthAndInfo:
    """헬스체크 및 서버 정보."""

    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.json() == {"status": "ok"}

    async def test_port(self, client: AsyncClient):
        from app.config import settings

        res = await client.get("/info/port")
        assert res.json() == f"Current port: {settings.SERVER_PORT}"

    async def test_request_id_header(self, client: AsyncClient):
        res = await client.get("/info/port", headers={"X-Request-ID": "abc-123"})
        assert res.headers["X-Request-ID"] == "abc-123"


class TestMath:
    """합계 계산 방식 비교."""

    async def test_all_sums_agree(self, client: AsyncClient):
        for path in ["sum-slow", "sum-formula", "sum-parallel", "sum-range"]:
            res = await client.get(f"/math/{path}")
            assert res.status_code == 200
            assert res.json() == EXPECTED_SUM, path

    def test_parallel_sum_uneven_chunks(self):
        from app.services.math_service import MathService

        service = MathService(n=10, chunks=3)
        assert service.sum_parallel() == 55
        assert service.sum_slow() == service.sum_range() == service.sum_formula() == 55


class TestMasking:
    """민감 필드 마스킹."""

    def test_mask_nested(self):
        masked = mask_sensitive({"name": "Harry", "password": "x", "inner": {"api_key": "k", "age": 17}})
        assert masked == {"name": "Harry", "password": "***", "inner": {"api_key": "***", "age": 17}}


class TestErrors:
    """HTTP 예외 상태 코드."""

    def test_payload_too_large_is_413(self):
        exc = PayloadTooLargeError("too big")
        assert exc.status_code == 413
        assert exc.detail == "too big"

"""요청 로깅 미들웨어 — structlog 콘솔 로그 + 선택적 Axiom 전송.

Request logging middleware.
Every request gets a request id bound to the structlog context and one
``request_completed`` log line (method, path, status, duration). When Axiom
is configured the same event, with query params and masked JSON body, is
also shipped to Axiom.
"""

import json
import re
import time
import uuid
from typing import Any

import structlog
from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings
from app.utils.logging import bind_request_id, get_logger

log = get_logger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하는 미들웨어.

    Middleware that logs every API request locally and, when configured,
    to Axiom. A failing Axiom ingest never affects the response.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = client
        self._dataset: str = settings.AXIOM_DATASET

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_json_body(self, request: Request) -> Any:
        # multipart 업로드는 기록하지 않음 — only JSON bodies are logged
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        if "application/json" not in request.headers.get("content-type", ""):
            return None
        body_bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return mask_sensitive(json.loads(body_bytes))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        structlog.contextvars.clear_contextvars()
        request_id: str = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        bind_request_id(request_id)

        start_time = time.perf_counter()
        request_body: Any = await self._read_json_body(request) if self._client else None

        status_code: int = 500
        error_detail: str | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            event: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if error_detail:
                event["error"] = error_detail
            log.info("request_completed", **event)
            self._ship(request, event, request_body, request_id)

    def _ship(self, request: Request, event: dict[str, Any], body: Any, request_id: str) -> None:
        if self._client is None:
            return
        payload: dict[str, Any] = {**event, "request_id": request_id}
        if request.query_params:
            payload["query_params"] = mask_sensitive(dict(request.query_params))
        if body is not None:
            payload["request_body"] = body
        try:
            self._client.ingest_events(self._dataset, [payload])
        except Exception as exc:
            # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
            log.warning("axiom_ingest_failed", error=str(exc))

"""요청/응답 로깅 미들웨어"""

import time
from typing import Callable, cast

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger
from app.core.middlewares.context import bind_request_id

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# 로깅 제외 경로
EXCLUDE_PATHS = {"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"}


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로깅 및 처리 시간 측정 미들웨어"""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.url.path in EXCLUDE_PATHS:
            return cast(Response, await call_next(request))

        request_id = bind_request_id(request.headers.get(REQUEST_ID_HEADER))
        extra = {"request_id": request_id}
        target = f"{request.method} {request.url.path}"
        client = request.client.host if request.client else "unknown"

        logger.info(f"→ {target} | Client: {client}", extra=extra)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.error(
                f"✗ {target} | Error: {e} | Time: {elapsed_ms:.2f}ms",
                extra=extra,
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed_ms:.2f}ms"

        # 리소스 API 실패(400)는 warning으로 기록
        status_mark = "✓" if response.status_code < 400 else "✗"
        log_method = (
            logger.info if response.status_code < 400 else logger.warning
        )
        log_method(
            f"{status_mark} {target} | Status: {response.status_code} "
            f"| Time: {elapsed_ms:.2f}ms",
            extra=extra,
        )

        return cast(Response, response)

"""미들웨어 모듈"""

from app.core.middlewares.context import bind_request_id, get_request_id
from app.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "bind_request_id",
    "get_request_id",
]

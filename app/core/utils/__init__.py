"""유틸리티 모듈"""

from app.core.utils.datetime import UTC, ensure_utc, next_timestamp, now_utc

__all__ = [
    "UTC",
    "now_utc",
    "ensure_utc",
    "next_timestamp",
]

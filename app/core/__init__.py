"""Core 모듈"""

from app.core.config import settings
from app.core.database import Base, get_db
from app.core.error_messages import get_error_message
from app.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ErrorCode,
)
from app.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "Base",
    "get_db",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "get_error_message",
    "get_logger",
    "setup_logging",
]

"""저장소/검증 예외를 사용자용 메시지로 변환

SQLAlchemy 무결성 오류와 Pydantic 검증 오류에서 클라이언트에 노출할
한 줄짜리 메시지를 추출합니다.

Example::

    try:
        await repository.create(user)
    except SQLAlchemyError as e:
        raise UserPersistenceException(get_error_message(e))
"""

import re
from typing import Any, Optional, Sequence

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

UNIQUE_VIOLATION = "23505"
DEFAULT_MESSAGE = "Something went wrong"
UNIQUE_FALLBACK_MESSAGE = "Unique field already exists"

_CONSTRAINT_NAME_RE = re.compile(r'unique constraint "(?P<name>[^"]+)"', re.I)
_UNIQUE_NAME_RE = re.compile(r"^uq_[^_]+_(?P<field>\w+)$")
_VALUE_ERROR_PREFIX = "Value error, "


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    """드라이버 예외에서 SQLSTATE 추출 (asyncpg / psycopg2)"""
    orig = exc.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        if candidate is None:
            continue
        code = getattr(candidate, "pgcode", None) or getattr(
            candidate, "sqlstate", None
        )
        if code:
            return str(code)
    return None


def _is_unique_violation(exc: IntegrityError) -> bool:
    if _sqlstate(exc) == UNIQUE_VIOLATION:
        return True
    return "unique constraint" in str(exc.orig).lower()


def get_unique_error_message(exc: IntegrityError) -> str:
    """unique 제약조건 위반 메시지 생성

    제약조건 이름 규칙(``uq_<table>_<field>``)에서 필드명을 추출합니다.
    """
    match = _CONSTRAINT_NAME_RE.search(str(exc.orig))
    if not match:
        return UNIQUE_FALLBACK_MESSAGE

    field_match = _UNIQUE_NAME_RE.match(match.group("name"))
    if not field_match:
        return UNIQUE_FALLBACK_MESSAGE

    field = field_match.group("field").replace("_", " ")
    return f"{field.capitalize()} already exists"


def _field_name(loc: Sequence[Any]) -> str:
    names = [str(part) for part in loc if isinstance(part, str)]
    # ("body", "name") 형태의 요청 검증 위치 처리
    if len(names) > 1 and names[0] == "body":
        names = names[1:]
    return names[-1] if names else "Field"


def _error_text(error: dict[str, Any]) -> str:
    if error.get("type") == "missing":
        field = _field_name(error.get("loc", ()))
        return f"{field.replace('_', ' ').capitalize()} is required"

    msg = str(error.get("msg", ""))
    if msg.startswith(_VALUE_ERROR_PREFIX):
        msg = msg[len(_VALUE_ERROR_PREFIX) :]
    return msg


def get_validation_message(errors: Sequence[dict[str, Any]]) -> str:
    """검증 오류 목록에서 메시지 추출 (마지막 오류 우선)"""
    message = ""
    for error in errors:
        text = _error_text(error)
        if text:
            message = text
    return message or DEFAULT_MESSAGE


def get_error_message(exc: BaseException) -> str:
    """예외 객체를 사용자용 메시지 문자열로 변환

    Args:
        exc: 저장소 또는 검증 계층에서 발생한 예외

    Returns:
        str: 클라이언트에 전달할 메시지
    """
    if isinstance(exc, IntegrityError):
        if _is_unique_violation(exc):
            return get_unique_error_message(exc)
        return DEFAULT_MESSAGE

    if isinstance(exc, SQLAlchemyError):
        return DEFAULT_MESSAGE

    if isinstance(exc, (ValidationError, RequestValidationError)):
        return get_validation_message(exc.errors())

    return str(exc) or DEFAULT_MESSAGE

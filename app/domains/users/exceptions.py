"""Users 도메인 예외 정의

모든 사용자 리소스 오류는 400으로 응답하며, 본문은 ``{"error": message}``
형태입니다 (``user_exception_handler``).
"""

from enum import Enum
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.exceptions import BadRequestException


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_LOOKUP_FAILED = "USER_LOOKUP_FAILED"
    EMAIL_ALREADY_RESERVED = "EMAIL_ALREADY_RESERVED"
    USER_VALIDATION_FAILED = "USER_VALIDATION_FAILED"
    USER_PERSISTENCE_FAILED = "USER_PERSISTENCE_FAILED"


class UserException(BadRequestException):
    """사용자 리소스 예외 베이스"""

    def __init__(
        self,
        message: str,
        error_code: str,
        detail: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, error_code=error_code, detail=detail)


class UserNotFoundException(UserException):
    """사용자를 찾을 수 없는 경우"""

    def __init__(self, user_id: str | None = None):
        super().__init__(
            message="User not found",
            error_code=UserErrorCode.USER_NOT_FOUND,
            detail={"user_id": user_id} if user_id else {},
        )


class UserLookupException(UserException):
    """사용자 조회 자체가 실패한 경우 (잘못된 ID 형식, 저장소 오류)"""

    def __init__(self, user_id: str | None = None):
        super().__init__(
            message="Could not retrieve user",
            error_code=UserErrorCode.USER_LOOKUP_FAILED,
            detail={"user_id": user_id} if user_id else {},
        )


class EmailAlreadyReservedException(UserException):
    """이미 가입된 이메일인 경우"""

    def __init__(self, email: str | None = None):
        super().__init__(
            message="This email already reserved",
            error_code=UserErrorCode.EMAIL_ALREADY_RESERVED,
            detail={"email": email} if email else {},
        )


class UserValidationException(UserException):
    """요청 데이터가 사용자 스키마 검증을 통과하지 못한 경우"""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code=UserErrorCode.USER_VALIDATION_FAILED,
        )


class UserPersistenceException(UserException):
    """저장소 쓰기/읽기 실패 (제약조건 위반 포함)"""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code=UserErrorCode.USER_PERSISTENCE_FAILED,
        )


async def user_exception_handler(
    request: Request, exc: UserException
) -> JSONResponse:
    """UserException 핸들러"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )

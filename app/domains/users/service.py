"""Users 도메인 서비스

사용자 리소스의 생성/조회/수정/삭제 규칙을 담당합니다.
저장소와 검증 계층의 오류는 모두 ``UserException`` 계열로 변환됩니다.
"""

import uuid
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.error_messages import get_error_message
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.utils.datetime import next_timestamp
from app.domains.users.exceptions import (
    EmailAlreadyReservedException,
    UserLookupException,
    UserNotFoundException,
    UserPersistenceException,
    UserValidationException,
)
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """사용자 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)

    async def create_user(self, payload: dict[str, Any]) -> User:
        """사용자 생성 (가입)

        이메일 중복을 먼저 확인한 뒤 스키마 검증과 저장을 수행합니다.
        중복 확인과 저장은 원자적이지 않으므로, 동시 요청 간 경합은
        ``uq_users_email`` 제약조건 위반으로 드러납니다.

        Args:
            payload: 요청 본문

        Returns:
            생성된 사용자 객체

        Raises:
            EmailAlreadyReservedException: 이미 가입된 이메일인 경우
            UserValidationException: 요청 데이터 검증 실패
            UserPersistenceException: 저장 실패 (제약조건 위반 포함)
        """
        email = payload.get("email")
        try:
            if isinstance(email, str) and email.strip():
                existing = await self.repository.get_by_email(email.strip())
                if existing:
                    raise EmailAlreadyReservedException(email=email.strip())

            data = UserCreate.model_validate(payload)
            user = User(name=data.name, email=data.email)
            user.set_password(data.password or "")
            created_user = await self.repository.create(user)
        except ValidationError as e:
            raise UserValidationException(get_error_message(e)) from e
        except SQLAlchemyError as e:
            logger.warning(
                "User create failed",
                extra={"request_id": get_request_id(), "error": str(e)},
            )
            raise UserPersistenceException(get_error_message(e)) from e

        logger.info(
            "User created",
            extra={
                "request_id": get_request_id(),
                "user_id": str(created_user.id),
                "action": "created",
            },
        )
        return created_user

    async def get_users(self) -> list[User]:
        """전체 사용자 목록 조회

        Raises:
            UserPersistenceException: 저장소 조회 실패
        """
        try:
            users = await self.repository.get_list()
        except SQLAlchemyError as e:
            raise UserPersistenceException(get_error_message(e)) from e
        return list(users)

    async def get_user_by_id(self, user_id: str) -> User:
        """ID로 사용자 조회

        Args:
            user_id: 경로 파라미터로 전달된 사용자 ID

        Returns:
            사용자 객체

        Raises:
            UserLookupException: ID 형식 오류 또는 저장소 오류
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        try:
            user = await self.repository.get_by_id(uuid.UUID(user_id))
        except (ValueError, SQLAlchemyError) as e:
            logger.warning(
                "User lookup failed",
                extra={
                    "request_id": get_request_id(),
                    "user_id": user_id,
                    "error": str(e),
                },
            )
            raise UserLookupException(user_id=user_id) from e

        if user is None:
            raise UserNotFoundException(user_id=user_id)
        return user

    async def update_user(self, user: User, payload: dict[str, Any]) -> User:
        """사용자 수정

        요청에 포함된 필드만 반영하고 ``updated`` 시각을 갱신합니다.

        Args:
            user: 조회된 사용자 객체
            payload: 요청 본문

        Returns:
            수정된 사용자 객체

        Raises:
            UserValidationException: 요청 데이터 검증 실패
            UserPersistenceException: 저장 실패 (이메일 중복 포함)
        """
        try:
            changes = UserUpdate.model_validate(payload).changes()
        except ValidationError as e:
            raise UserValidationException(get_error_message(e)) from e

        password = changes.pop("password", None)
        for field, value in changes.items():
            setattr(user, field, value)
        if password is not None:
            user.set_password(password)
        user.updated = next_timestamp(user.updated)

        try:
            updated_user = await self.repository.update(user)
        except SQLAlchemyError as e:
            raise UserPersistenceException(get_error_message(e)) from e

        logger.info(
            "User updated",
            extra={
                "request_id": get_request_id(),
                "user_id": str(updated_user.id),
                "fields": sorted(changes) + (["password"] if password else []),
                "action": "updated",
            },
        )
        return updated_user

    async def delete_user(self, user: User) -> User:
        """사용자 삭제

        Args:
            user: 조회된 사용자 객체

        Returns:
            삭제된 사용자 객체

        Raises:
            UserPersistenceException: 삭제 실패
        """
        try:
            deleted_user = await self.repository.delete(user)
        except SQLAlchemyError as e:
            raise UserPersistenceException(get_error_message(e)) from e

        logger.info(
            "User deleted",
            extra={
                "request_id": get_request_id(),
                "user_id": str(deleted_user.id),
                "action": "deleted",
            },
        )
        return deleted_user

"""Users 도메인 리포지토리"""

import uuid
from typing import Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from app.domains.users.models import User

# 목록 조회 시 로드할 컬럼 (자격 증명 컬럼 제외)
PUBLIC_COLUMNS = (User.id, User.name, User.email, User.created, User.updated)


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """ID로 사용자 조회

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 객체 또는 None
        """
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        """이메일로 사용자 조회

        Args:
            email: 이메일

        Returns:
            사용자 객체 또는 None
        """
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_list(self) -> Sequence[User]:
        """전체 사용자 목록 조회 (공개 컬럼만 로드)"""
        query = select(User).options(load_only(*PUBLIC_COLUMNS))
        result = await self.session.execute(query)
        return cast(Sequence[User], result.scalars().all())

    async def create(self, user: User) -> User:
        """사용자 생성

        Args:
            user: 생성할 사용자 객체

        Returns:
            생성된 사용자 객체
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """사용자 수정

        Args:
            user: 수정할 사용자 객체

        Returns:
            수정된 사용자 객체
        """
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> User:
        """사용자 삭제 (Hard Delete)

        Args:
            user: 삭제할 사용자 객체

        Returns:
            삭제된 사용자 객체 (메모리상 스냅샷)
        """
        await self.session.delete(user)
        await self.session.flush()
        return user

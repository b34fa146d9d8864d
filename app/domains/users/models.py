"""Users 도메인 모델 정의"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.core.utils.datetime import now_utc
from app.domains.users.security import (
    encrypt_password,
    make_salt,
    verify_password,
)


class User(Base):
    """사용자 모델

    ``hashed_password``와 ``salt``는 저장소 밖으로 노출되지 않아야 하며,
    응답 직렬화는 ``UserResponse``를 통해서만 이루어집니다.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4, comment="사용자 ID"
    )
    name: Mapped[str] = mapped_column(String(255), comment="이름")
    email: Mapped[str] = mapped_column(String(320), comment="이메일")
    hashed_password: Mapped[str] = mapped_column(
        String(128), comment="솔트 적용 비밀번호 해시"
    )
    salt: Mapped[str] = mapped_column(String(64), comment="비밀번호 솔트")
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=now_utc,
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="수정 일시"
    )

    def set_password(self, password: str) -> None:
        """새 솔트를 발급하고 비밀번호 해시 갱신"""
        self.salt = make_salt()
        self.hashed_password = encrypt_password(password, self.salt)

    def authenticate(self, plain_text: str) -> bool:
        """평문 비밀번호 일치 여부"""
        return verify_password(plain_text, self.hashed_password)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

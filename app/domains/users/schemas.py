"""Users 도메인 스키마 정의

요청 본문 검증(UserCreate, UserUpdate)과 응답 직렬화(UserResponse)를
담당합니다. 민감 필드(hashed_password, salt)는 UserResponse에 정의되어
있지 않으므로 어떤 응답에도 포함되지 않습니다.
"""

import re
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = re.compile(r".+@.+\..+")
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72  # bcrypt 입력 한도


def validate_name(value: Optional[str]) -> str:
    name = (value or "").strip()
    if not name:
        raise ValueError("Name is required")
    return name


def validate_email(value: Optional[str]) -> str:
    email = (value or "").strip()
    if not email:
        raise ValueError("Email is required")
    if not EMAIL_PATTERN.match(email):
        raise ValueError("Please fill a valid email address")
    return email


def validate_password(value: Optional[str]) -> str:
    if not value:
        raise ValueError("Password is required")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters."
        )
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes."
        )
    return value


class UserFields(BaseModel):
    """사용자 필드 공통 검증"""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, description="이름")
    email: Optional[str] = Field(default=None, description="이메일")
    password: Optional[str] = Field(
        default=None, description="비밀번호 (6자 이상)"
    )

    @field_validator("name")
    @classmethod
    def check_name(cls, v: Optional[str]) -> str:
        return validate_name(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: Optional[str]) -> str:
        return validate_email(v)

    @field_validator("password")
    @classmethod
    def check_password(cls, v: Optional[str]) -> str:
        return validate_password(v)


class UserCreate(UserFields):
    """사용자 생성(가입) 요청 스키마"""

    # 누락된 필드도 검증 메시지를 내도록 기본값까지 검증
    model_config = ConfigDict(extra="ignore", validate_default=True)


class UserUpdate(UserFields):
    """사용자 수정 요청 스키마 (patch)

    요청에 포함된 필드만 반영됩니다. 정의되지 않은 필드는 무시합니다.
    """

    def changes(self) -> dict[str, str]:
        """요청에 명시된 필드만 반환"""
        return self.model_dump(exclude_unset=True)


class UserResponse(BaseModel):
    """사용자 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    created: datetime
    updated: Optional[datetime] = None

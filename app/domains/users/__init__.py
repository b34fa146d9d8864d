"""Users 도메인 모듈

사용자 리소스 CRUD(가입, 목록, 조회, 수정, 삭제)를 제공하는 도메인입니다.

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (UserCreate, UserUpdate, UserResponse)
    - security.py: 비밀번호 솔트/해시 유틸리티
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (중복 확인, patch 적용, 삭제)
    - router.py: API 엔드포인트 (user_by_id 경로 의존성 포함)
    - exceptions.py: 도메인 예외 및 응답 핸들러
"""

from app.domains.users.exceptions import (
    EmailAlreadyReservedException,
    UserErrorCode,
    UserException,
    UserLookupException,
    UserNotFoundException,
    UserPersistenceException,
    UserValidationException,
    user_exception_handler,
)
from app.domains.users.models import User
from app.domains.users.router import router
from app.domains.users.schemas import UserCreate, UserResponse, UserUpdate
from app.domains.users.service import UserService

__all__ = [
    "User",
    "UserService",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "router",
    "UserErrorCode",
    "UserException",
    "UserNotFoundException",
    "UserLookupException",
    "EmailAlreadyReservedException",
    "UserValidationException",
    "UserPersistenceException",
    "user_exception_handler",
]

"""테스트 설정"""

import os
import uuid
from typing import Generator, Optional
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

# 테스트에서는 bcrypt 비용 인자를 최소로 낮춤 (settings 로딩 전에 설정)
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

from app.core.database import Base, get_db
from app.core.utils.datetime import now_utc
from app.domains.users.models import User
from app.domains.users.router import get_user_service
from app.domains.users.service import UserService
from app.main import app

UNIQUE_EMAIL_ERROR = (
    'duplicate key value violates unique constraint "uq_users_email"'
)


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False
    except Exception:
        return False


DOCKER_AVAILABLE = _is_docker_available()


class InMemoryUserRepository:
    """UserRepository와 같은 인터페이스의 메모리 저장소

    ``uq_users_email`` 제약조건을 흉내내어 중복 이메일 저장 시
    IntegrityError를 발생시킵니다.
    """

    def __init__(self) -> None:
        self.users: dict[uuid.UUID, User] = {}

    def _check_unique_email(self, user: User) -> None:
        for other in self.users.values():
            if other.email == user.email and other.id != user.id:
                raise IntegrityError(
                    "INSERT INTO users", {}, Exception(UNIQUE_EMAIL_ERROR)
                )

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    async def get_list(self) -> list[User]:
        return list(self.users.values())

    async def create(self, user: User) -> User:
        self._check_unique_email(user)
        user.id = user.id or uuid.uuid4()
        user.created = user.created or now_utc()
        self.users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self._check_unique_email(user)
        return user

    async def delete(self, user: User) -> User:
        self.users.pop(user.id, None)
        return user


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """메모리 사용자 저장소"""
    return InMemoryUserRepository()


@pytest.fixture
def memory_user_service(user_repository) -> UserService:
    """메모리 저장소를 사용하는 UserService"""
    service = UserService(MagicMock())
    service.repository = user_repository  # type: ignore[assignment]
    return service


@pytest_asyncio.fixture
async def api_client(memory_user_service):
    """비동기 테스트 클라이언트 (메모리 저장소 사용, DB 불필요)"""
    app.dependency_overrides[get_user_service] = lambda: memory_user_service

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def user_payload():
    """가입 요청 기본 페이로드"""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "password": "secret123",
    }


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL (asyncpg)"""
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


# NOTE:
# pytest-asyncio는 테스트마다 독립적인 event loop를 생성하므로
# async fixture는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def db_session(test_database_url: str):
    """테스트 데이터베이스 세션 (테스트마다 스키마 재생성)"""
    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session):
    """비동기 테스트 클라이언트 (테스트 DB 사용)"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()

"""Users 도메인 라우터

``/{user_id}`` 경로는 ``user_by_id`` 의존성이 먼저 사용자를 조회하여
``request.state.profile``에 저장한 뒤 핸들러로 전달합니다. 조회에 실패하면
핸들러는 호출되지 않습니다.

모든 사용자 응답은 ``UserResponse``로 직렬화되므로 민감 필드가
응답에 포함되지 않습니다.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.schemas import ErrorMessageResponse, MessageResponse
from app.domains.users.models import User
from app.domains.users.schemas import UserResponse
from app.domains.users.service import UserService

router = APIRouter(responses={400: {"model": ErrorMessageResponse}})

PROFILE_KEY = "profile"


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성"""
    return UserService(session)


async def user_by_id(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> User:
    """경로의 user_id로 사용자를 조회하여 요청 컨텍스트에 연결"""
    user = await service.get_user_by_id(user_id)
    setattr(request.state, PROFILE_KEY, user)
    return user


@router.post("", response_model=MessageResponse)
async def create_user(
    payload: Optional[dict[str, Any]] = Body(default=None),
    service: UserService = Depends(get_user_service),
):
    """사용자 생성 (가입)"""
    await service.create_user(payload)
    return MessageResponse(message="Successfully signed up")


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """사용자 목록 조회"""
    return await service.get_users()


@router.get("/{user_id}", response_model=UserResponse)
async def read_user(profile: User = Depends(user_by_id)):
    """사용자 상세 조회"""
    return profile


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    payload: Optional[dict[str, Any]] = Body(default=None),
    profile: User = Depends(user_by_id),
    service: UserService = Depends(get_user_service),
):
    """사용자 수정 (본문이 없으면 빈 패치)"""
    return await service.update_user(profile, payload or {})


@router.delete("/{user_id}", response_model=UserResponse)
async def remove_user(
    profile: User = Depends(user_by_id),
    service: UserService = Depends(get_user_service),
):
    """사용자 삭제"""
    return await service.delete_user(profile)

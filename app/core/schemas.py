"""공통 API 응답 스키마

이 모듈은 API 응답의 일관된 구조를 정의합니다.

Usage::

    # 서비스 메타 응답 (health, 버전 정보)
    from app.core.schemas import APIResponse, create_response
    return create_response(data={"status": "healthy"}, message="OK")

    # 리소스 API 성공/실패 응답
    from app.core.schemas import ErrorMessageResponse, MessageResponse
    return MessageResponse(message="Successfully signed up")
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답

    Example::

        @app.get("/health", response_model=APIResponse[dict[str, Any]])
        async def health_check():
            return APIResponse(success=True, message="OK", data={...})
    """

    success: bool = True
    message: str = "Request processed successfully"
    data: Optional[DataT] = None


def create_response(
    data: Optional[DataT] = None,
    message: str = "Request processed successfully",
    success: bool = True,
) -> APIResponse[DataT]:
    """API 응답 생성 팩토리 함수

    Args:
        data: 응답 데이터
        message: 응답 메시지
        success: 성공 여부

    Returns:
        APIResponse 인스턴스
    """
    return APIResponse(success=success, message=message, data=data)


class MessageResponse(BaseModel):
    """처리 결과 메시지 응답"""

    message: str = Field(..., description="처리 결과 메시지")


class ErrorMessageResponse(BaseModel):
    """리소스 API 실패 응답

    Example::

        {"error": "User not found"}
    """

    error: str = Field(..., description="에러 메시지")

"""요청 ID 컨텍스트 관리"""

import contextvars
import re
import uuid
from typing import Optional

# 외부에서 전달된 요청 ID 허용 형식 (로그 인젝션 방지)
_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._-]{1,128}")

request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def get_request_id() -> Optional[str]:
    """현재 요청 ID 반환"""
    return request_id_ctx.get()


def bind_request_id(candidate: Optional[str] = None) -> str:
    """요청 ID를 컨텍스트에 바인딩

    헤더 값이 없거나 허용 형식이 아니면 새 UUID를 생성합니다.
    """
    if candidate is None or not _REQUEST_ID_RE.fullmatch(candidate):
        candidate = str(uuid.uuid4())
    request_id_ctx.set(candidate)
    return candidate

"""요청 ID 컨텍스트 테스트"""

from app.core.middlewares.context import bind_request_id, get_request_id


def test_bind_request_id_keeps_valid_header():
    request_id = bind_request_id("req-001")

    assert request_id == "req-001"
    assert get_request_id() == "req-001"


def test_bind_request_id_generates_when_missing():
    request_id = bind_request_id(None)

    assert len(request_id) == 36
    assert get_request_id() == request_id


def test_bind_request_id_rejects_unsafe_header():
    """허용되지 않는 문자가 포함되면 새 ID 생성"""
    request_id = bind_request_id("bad id\nINJECTED")

    assert request_id != "bad id\nINJECTED"
    assert "\n" not in request_id

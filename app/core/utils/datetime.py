"""날짜/시간 유틸리티"""

from datetime import datetime, timedelta, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """naive datetime을 UTC로 간주하여 tz-aware로 변환"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def next_timestamp(previous: datetime | None) -> datetime:
    """이전 시각보다 항상 큰 현재 시각 반환

    동일 마이크로초 안에서 연속 갱신되거나 시계가 역행해도
    갱신 시각이 단조 증가하도록 보정합니다.
    """
    current = now_utc()
    if previous is None:
        return current

    previous = ensure_utc(previous)
    if current <= previous:
        return previous + timedelta(microseconds=1)
    return current

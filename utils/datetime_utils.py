from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """현재 시각 (UTC, tz-aware)"""
    return datetime.now(timezone.utc)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """
    datetime → ISO8601 문자열 (UTC, 'Z' 접미사)
    - sqlite/MySQL DATETIME 처럼 tz 정보를 보존하지 않는 컬럼에서 읽은 값은 UTC로 간주
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def utc_day_bounds(now: Optional[datetime] = None) -> tuple[datetime, datetime]:
    """오늘(UTC) 00:00 ~ 다음날 00:00 구간"""
    now = now or utc_now()
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)

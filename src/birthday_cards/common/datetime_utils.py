from __future__ import annotations

from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-03-14T09:30:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mock easier.
    """
    return date.today()

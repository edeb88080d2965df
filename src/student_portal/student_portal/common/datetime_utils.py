from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Longer ISO timestamps ("2025-01-03T00:00:00.000Z") are cut to their date part.
    """
    return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def shift_day(current: date, direction: str, *, today: date) -> date:
    """Move one day back or forward, never past today."""
    if direction == "prev":
        return current - timedelta(days=1)
    if direction == "next":
        return min(current + timedelta(days=1), today)
    return current

from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT, TIME_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_hhmm(value: datetime) -> str:
    """24-hour zero-padded HH:MM; restore ordering depends on this exact shape."""
    return value.strftime(TIME_FORMAT)


def combine_hhmm(day: date, hhmm: str) -> datetime:
    """Place an HH:MM time-of-day onto the given calendar day (seconds = 0)."""
    parsed = datetime.strptime(hhmm, TIME_FORMAT).time()
    return datetime.combine(day, parsed)


def format_elapsed(total_seconds: int) -> str:
    """Format whole seconds as HH:MM:SS. Hours are not wrapped at 24."""
    hours, remainder = divmod(int(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()

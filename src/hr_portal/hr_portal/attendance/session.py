from __future__ import annotations

import logging
import threading
from datetime import date, datetime
from functools import partial
from typing import Any, Callable, Optional, Protocol, Sequence, Union

from ..common.datetime_utils import combine_hhmm, format_elapsed, format_hhmm, format_iso_date, now_local, parse_iso_date
from ..core.constants import DEFAULT_TICK_SECONDS, ELAPSED_ZERO, RECORD_ID_PREFIX
from ..core.enums import AttendanceStatus, SessionState
from ..core.exceptions import SessionStateError, StaleSessionError
from .model import AttendanceRecord
from .ticker import SessionTicker

logger = logging.getLogger(__name__)


class Ticker(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TickerFactory = Callable[[Callable[[], None]], Ticker]


def latest_for_employee(records: Sequence[AttendanceRecord], employee_id: str) -> Optional[AttendanceRecord]:
    """Most recent record by (date desc, check_in desc).

    Plain string comparison is enough because dates and times are zero-padded.
    """
    own = [r for r in records if r.employee_id == employee_id]
    if not own:
        return None
    return max(own, key=lambda r: r.sort_key)


def new_record_id(records: Sequence[AttendanceRecord], now: datetime) -> str:
    taken = {r.id for r in records}
    stamp = int(now.timestamp() * 1000)
    while f"{RECORD_ID_PREFIX}{stamp}" in taken:
        stamp += 1
    return f"{RECORD_ID_PREFIX}{stamp}"


class AttendanceSession:
    """Self-service check-in state for one acting employee.

    The record collection is the source of truth; the fields here are a cached
    projection of it, rebuilt by :meth:`restore_from_history`. Mutating
    operations take the current collection and return the new one; handing it
    back to the owner is the caller's job.

    While CHECKED_IN a ticker refreshes ``elapsed_display`` every
    ``tick_seconds``. Every path out of CHECKED_IN cancels it, as does
    :meth:`close`.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = now_local,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        ticker_factory: Optional[TickerFactory] = None,
        strict_checkout: bool = False,
    ):
        self._clock = clock
        if ticker_factory is None and tick_seconds > 0:
            ticker_factory = partial(SessionTicker, interval=tick_seconds)
        self._ticker_factory = ticker_factory
        self._strict_checkout = strict_checkout

        self._lock = threading.RLock()
        self._ticker: Optional[Ticker] = None

        self.is_checked_in = False
        self.check_in_instant: Optional[datetime] = None
        self.elapsed_display = ELAPSED_ZERO
        self.active_record_id: Optional[str] = None

    @property
    def state(self) -> SessionState:
        return SessionState.CHECKED_IN if self.is_checked_in else SessionState.CHECKED_OUT

    @property
    def ticking(self) -> bool:
        return self._ticker is not None

    def restore_from_history(
        self,
        records: Sequence[AttendanceRecord],
        employee_id: str,
        today: Union[date, str],
    ) -> SessionState:
        today_str = today if isinstance(today, str) else format_iso_date(today)
        latest = latest_for_employee(records, employee_id)

        if latest is not None and latest.date == today_str and latest.is_open:
            instant = combine_hhmm(parse_iso_date(today_str), latest.check_in)
            with self._lock:
                changed = self.active_record_id != latest.id
                self._enter_checked_in(latest.id, instant)
            if changed:
                logger.info("Restored open session %s for employee %s", latest.id, employee_id)
            return SessionState.CHECKED_IN

        with self._lock:
            was_checked_in = self.is_checked_in
            ticker = self._enter_checked_out()
        self._cancel(ticker)
        if was_checked_in:
            logger.info("No open session for employee %s on %s", employee_id, today_str)
        return SessionState.CHECKED_OUT

    def check_in(
        self,
        records: Sequence[AttendanceRecord],
        employee_id: str,
        now: Optional[datetime] = None,
    ) -> list[AttendanceRecord]:
        now = now or self._clock()
        with self._lock:
            if self.is_checked_in:
                raise SessionStateError("Already checked in")

            record = AttendanceRecord(
                id=new_record_id(records, now),
                employee_id=employee_id,
                date=format_iso_date(now.date()),
                check_in=format_hhmm(now),
                check_out="",
                status=AttendanceStatus.PRESENT,
                is_verified=False,
            )
            self._enter_checked_in(record.id, now, now)

        logger.info("Employee %s checked in at %s (%s)", employee_id, record.check_in, record.id)
        return [record, *records]

    def check_out(
        self,
        records: Sequence[AttendanceRecord],
        now: Optional[datetime] = None,
    ) -> list[AttendanceRecord]:
        now = now or self._clock()
        with self._lock:
            if not self.is_checked_in or self.active_record_id is None:
                raise SessionStateError("Not checked in")

            record_id = self.active_record_id
            found = any(r.id == record_id for r in records)
            if not found and self._strict_checkout:
                raise StaleSessionError(record_id)

            check_out = format_hhmm(now)
            updated = [r.with_check_out(check_out) if r.id == record_id else r for r in records]
            ticker = self._enter_checked_out()

        self._cancel(ticker)
        if found:
            logger.info("Checked out %s at %s", record_id, check_out)
        else:
            logger.warning("Checkout target %s is missing; collection left unchanged", record_id)
        return updated

    def refresh_elapsed(self, now: Optional[datetime] = None) -> str:
        """Recompute the elapsed display once. Negative spans leave it frozen."""
        now = now or self._clock()
        with self._lock:
            if self.is_checked_in and self.check_in_instant is not None:
                seconds = (now - self.check_in_instant).total_seconds()
                if seconds >= 0:
                    self.elapsed_display = format_elapsed(int(seconds))
            return self.elapsed_display

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "state": self.state.value,
                "checkedIn": self.is_checked_in,
                "since": format_hhmm(self.check_in_instant) if self.check_in_instant else None,
                "elapsed": self.elapsed_display,
                "activeRecordId": self.active_record_id,
            }

    def close(self) -> None:
        with self._lock:
            ticker, self._ticker = self._ticker, None
        self._cancel(ticker)

    def __enter__(self) -> "AttendanceSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _enter_checked_in(self, record_id: str, instant: datetime, now: Optional[datetime] = None) -> None:
        if self.active_record_id != record_id:
            self.elapsed_display = ELAPSED_ZERO
        self.is_checked_in = True
        self.active_record_id = record_id
        self.check_in_instant = instant
        self.refresh_elapsed(now)
        if self._ticker is None and self._ticker_factory is not None:
            self._ticker = self._ticker_factory(self.refresh_elapsed)
            self._ticker.start()

    def _enter_checked_out(self) -> Optional[Ticker]:
        # Caller cancels the returned ticker after releasing the lock.
        self.is_checked_in = False
        self.check_in_instant = None
        self.elapsed_display = ELAPSED_ZERO
        self.active_record_id = None
        ticker, self._ticker = self._ticker, None
        return ticker

    @staticmethod
    def _cancel(ticker: Optional[Ticker]) -> None:
        if ticker is not None:
            ticker.cancel()

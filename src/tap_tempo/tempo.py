"""Tap tempo estimation.

A tap is a single timing event (one key press, one button click).  *N*
taps span *N - 1* intervals, so the tempo is simply the interval count
divided by the minutes elapsed between the first tap and the latest one.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Literal

from .schema import TapTempoConfig

logger = logging.getLogger(__name__)

_MS_PER_MINUTE = 60_000.0
_ONE_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Current wall-clock time as a UTC-aware datetime."""
    return datetime.now(timezone.utc)


def calculate_tempo(
    start_time: datetime,
    end_time: datetime,
    tap_count: int,
    *,
    zero_interval: Literal["infinite", "absent"] = "infinite",
) -> float | None:
    """Return BPM for *tap_count* taps spread from *start_time* to *end_time*.

    Returns ``None`` when fewer than two taps exist (no complete interval)
    or when *start_time* is after *end_time*.  Elapsed time is measured in
    whole milliseconds.

    Two taps in the same millisecond give ``float("inf")`` unless
    *zero_interval* is ``"absent"``, in which case ``None`` is returned.
    """
    if tap_count < 2:
        return None

    if start_time > end_time:
        logger.debug("Inverted tap range %s > %s, no tempo", start_time, end_time)
        return None

    interval_count = tap_count - 1

    elapsed_ms = (end_time - start_time) // _ONE_MS
    if elapsed_ms == 0:
        return None if zero_interval == "absent" else float("inf")

    elapsed_minutes = elapsed_ms / _MS_PER_MINUTE
    return interval_count / elapsed_minutes


class TapTempo:
    """Accumulates taps and reports BPM as soon as it can be computed.

    The first tap only records the start time.  Every later tap returns the
    average tempo from the first tap up to now.  Nothing is ever reset, so
    the estimate settles the longer the user keeps tapping.

    *clock* returns the current time and defaults to :func:`utc_now`; pass a
    fake one to get deterministic timestamps.  Not thread-safe.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        config: TapTempoConfig | None = None,
    ) -> None:
        self.clock = clock if clock is not None else utc_now
        self.config = config if config is not None else TapTempoConfig()
        self._start_time: datetime | None = None
        self._tap_count: int = 0

    @property
    def start_time(self) -> datetime | None:
        """Time of the first tap, or None before any tap."""
        return self._start_time

    @property
    def tap_count(self) -> int:
        return self._tap_count

    def tap(self) -> float | None:
        """Register one tap.  Returns BPM, or None on the first tap."""
        now = self.clock()
        self._tap_count += 1

        if self._start_time is None:
            self._start_time = now
            logger.debug("First tap at %s", now)
            return None

        return calculate_tempo(
            self._start_time,
            now,
            self._tap_count,
            zero_interval=self.config.zero_interval,
        )

    def __repr__(self) -> str:
        return f"TapTempo(tap_count={self._tap_count}, start_time={self._start_time!r})"

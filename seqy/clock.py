from __future__ import annotations

import logging
import time
import typing
from datetime import datetime, timedelta
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq

logger = logging.getLogger(__name__)

Interval = Union[int, float, timedelta]


def _seconds(interval: Interval) -> float:
    """normalise an interval to seconds, rejecting non-positive ones"""
    seconds = interval.total_seconds() if isinstance(interval, timedelta) else float(interval)
    if seconds <= 0:
        raise ValueError(f"tick interval must be positive, got {interval!r}")
    return seconds


def _ticks(seconds: float, tz=None) -> Iterator[datetime]:
    """
    yields the wall-clock time every `seconds`, the first one a full interval after
    iteration starts. ticks missed by a slow consumer are dropped, not bunched up.
    """
    next_tick = time.monotonic() + seconds
    while True:
        delay = next_tick - time.monotonic()
        if delay > 0:
            time.sleep(delay)
        yield datetime.now(tz)
        next_tick += seconds
        now = time.monotonic()
        if now > next_tick:
            missed = int((now - next_tick) // seconds) + 1
            logger.debug(f"consumer too slow, dropping {missed} tick(s)")
            next_tick += missed * seconds


def every_until(interval: Interval, until: datetime) -> 'Seq[datetime]':
    """yields the time every interval until the tick time passes `until`"""
    from .sequence import Seq
    seconds = _seconds(interval)

    def tick_data():
        for now in _ticks(seconds, until.tzinfo):
            if now > until:
                return
            yield now

    return Seq(tick_data)


def every_n(interval: Interval, count: int) -> 'Seq[datetime]':
    """yields the time every interval, `count` times"""
    from .sequence import Seq
    seconds = _seconds(interval)

    def tick_data():
        if count <= 0:
            return
        remaining = count
        for now in _ticks(seconds):
            yield now
            remaining -= 1
            if remaining == 0:
                return

    return Seq(tick_data)

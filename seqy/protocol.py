"""
ordered comparison of two lazy sequences.

sequence `a` is iterated on the caller's thread. sequence `b` is driven on its own
thread and handed over one element at a time through an unbuffered channel, so `b`
never runs more than one element ahead of what the comparison has consumed. the
channel is interrupted in a `finally` on every exit path, which wakes the `b`
driver at once and stops it at its current or next send. anything `b` raises
before then is re-raised on the caller.
"""
from __future__ import annotations

import logging
from .channel import Channel, spawn_driver
from .types import *

logger = logging.getLogger(__name__)

_UNEQUAL = -1


class _Handoff(Generic[T]):
    """drives `source` on a background thread into a rendezvous channel"""

    def __init__(self, source: Iterable[T]):
        self.values: Channel[T] = Channel()
        self.error: Optional[BaseException] = None
        self._source = source

    def start(self) -> '_Handoff[T]':
        spawn_driver('compare', self._drive)
        return self

    def stop(self) -> None:
        self.values.interrupt()

    def _drive(self) -> None:
        try:
            for item in self._source:
                if not self.values.send(item):
                    logger.debug("comparison finished early, stopping driver")
                    return
        except BaseException as e:
            # raised again on the caller if the comparison is still waiting on b
            logger.debug(f"sequence driven for comparison failed: {e!r}")
            self.error = e
        finally:
            self.values.close()

    def next(self) -> Tuple[Optional[T], bool]:
        value, ok = self.values.recv()
        if not ok and self.error is not None:
            raise self.error
        return value, ok


def compare_func(a: Iterable[A], b: Iterable[B], compare: Callable[[A, B], int]) -> int:
    """
    compare the elements of a and b pairwise with `compare`, stopping at the first
    non-zero result and returning it. when one sequence runs out first it is the
    lesser one: -1 if a is shorter, 1 if b is shorter, 0 if both end together.
    """
    handoff = _Handoff(b).start()
    try:
        for av in a:
            bv, ok = handoff.next()
            if not ok:  # b is shorter than a
                return 1
            c = compare(av, bv)
            if c != 0:
                return c

        # a is done, b is longer if anything is still coming
        _, ok = handoff.next()
        if ok:
            return -1
        return 0
    finally:
        handoff.stop()


def compare(a: Iterable[T], b: Iterable[T]) -> int:
    """compare_func using the natural ordering of the elements"""
    return compare_func(a, b, natural_compare)


def compare_kv_func(a: Iterable[Any], b: Iterable[Any], compare: Callable[[KV, KV], int]) -> int:
    """compare_func over key-value pairs; each side may have its own key and value types"""
    return compare_func(_pairs(a), _pairs(b), compare)


def compare_kv(a: Iterable[Any], b: Iterable[Any]) -> int:
    """compare key-value sequences by key first, then by value"""
    return compare_kv_func(a, b, kv_compare)


def equal(a: Iterable[T], b: Iterable[T]) -> bool:
    return equal_func(a, b, lambda x, y: x == y)


def equal_func(a: Iterable[A], b: Iterable[B], eq: Callable[[A, B], bool]) -> bool:
    """true when both sequences have the same length and eq holds pairwise"""
    return compare_func(a, b, lambda x, y: 0 if eq(x, y) else _UNEQUAL) == 0


def equal_kv(a: Iterable[Any], b: Iterable[Any]) -> bool:
    return equal_kv_func(a, b, lambda x, y: x.key == y.key and x.value == y.value)


def equal_kv_func(a: Iterable[Any], b: Iterable[Any], eq: Callable[[KV, KV], bool]) -> bool:
    return compare_kv_func(a, b, lambda x, y: 0 if eq(x, y) else _UNEQUAL) == 0


def _pairs(items: Iterable[Any]) -> Iterator[KV]:
    for item in items:
        yield as_kv(item)

from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, KVSeq

_NO_ZERO = object()


def _is_zero(item: Any, zero: Any) -> bool:
    """with no explicit zero, python's falsy values are the zero values"""
    if zero is _NO_ZERO:
        return not item
    return item == zero


def _extreme(items: Iterable[T], replaces: Callable[[T, T], bool]) -> Tuple[Optional[T], bool]:
    """the first element is the tentative extreme; later ones win only when `replaces` says so"""
    found = False
    best = None
    for item in items:
        if not found:
            best, found = item, True
        elif replaces(item, best):
            best = item
    return best, found


class AggregateAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Seq[T]'):
        self._sequence = sequence_instance

    def min(self) -> Tuple[Optional[T], bool]:
        """smallest element by natural order and whether one exists"""
        return _extreme(self._sequence, lambda item, best: item < best)

    def max(self) -> Tuple[Optional[T], bool]:
        """largest element by natural order and whether one exists"""
        return _extreme(self._sequence, lambda item, best: item > best)

    def min_func(self, compare: Comparer[T]) -> Tuple[Optional[T], bool]:
        """smallest element by `compare`; ties keep the earlier element"""
        return _extreme(self._sequence, lambda item, best: compare(item, best) < 0)

    def max_func(self, compare: Comparer[T]) -> Tuple[Optional[T], bool]:
        """largest element by `compare`; ties keep the earlier element"""
        return _extreme(self._sequence, lambda item, best: compare(item, best) > 0)

    def reduce(self, initial: U, accumulator: Accumulator[U, T]) -> U:
        """left fold starting from `initial`"""
        result = initial
        for item in self._sequence:
            result = accumulator(result, item)
        return result

    def count(self) -> int:
        return sum(1 for _ in self._sequence)

    def count_by(self, predicate: Predicate[T]) -> int:
        """number of elements matching the predicate"""
        return sum(1 for item in self._sequence if predicate(item))

    def count_values(self) -> 'KVSeq[T, int]':
        """
        frequency table of the elements as a key-value sequence (value -> occurrences).
        the input is consumed here, before anything is returned. no order is promised.
        """
        from ..sequence import KVSeq
        counts: Dict[T, int] = {}
        for item in self._sequence:
            counts[item] = counts.get(item, 0) + 1
        return KVSeq(lambda: (KV(key, value) for key, value in counts.items()))

    def coalesce(self, zero: Any = _NO_ZERO) -> Tuple[Optional[T], bool]:
        """
        first element that is not the zero value, and whether one was found.
        pass `zero` to say what zero is; without it falsy values count as zero and
        the not-found result is the first zero seen (None for an empty sequence).
        """
        fallback = None if zero is _NO_ZERO else zero
        seen_zero = False
        for item in self._sequence:
            if not _is_zero(item, zero):
                return item, True
            if not seen_zero and zero is _NO_ZERO:
                fallback, seen_zero = item, True
        return fallback, False

    def is_sorted(self) -> bool:
        """true if every element is >= its predecessor"""
        first = True
        prev = None
        for item in self._sequence:
            if not first and item < prev:
                return False
            first = False
            prev = item
        return True


class KVAggregateAccessor(Generic[K, V]):
    def __init__(self, sequence_instance: 'KVSeq[K, V]'):
        self._sequence = sequence_instance

    def min_func(self, compare: PairComparer) -> Tuple[Optional[KV[K, V]], bool]:
        """smallest pair by `compare`; ties keep the earlier pair"""
        return _extreme(self._sequence, lambda pair, best: compare(pair, best) < 0)

    def max_func(self, compare: PairComparer) -> Tuple[Optional[KV[K, V]], bool]:
        """largest pair by `compare`; ties keep the earlier pair"""
        return _extreme(self._sequence, lambda pair, best: compare(pair, best) > 0)

    def reduce(self, initial: U, accumulator: Callable[[U, K, V], U]) -> U:
        """left fold calling accumulator(acc, key, value)"""
        result = initial
        for key, value in self._sequence:
            result = accumulator(result, key, value)
        return result

    def count(self) -> int:
        return sum(1 for _ in self._sequence)

    def count_by(self, predicate: PairPredicate) -> int:
        return sum(1 for key, value in self._sequence if predicate(key, value))

    def coalesce(self, zero: Any = _NO_ZERO) -> Tuple[KV[K, V], bool]:
        """first pair whose value is not the zero value, and whether one was found"""
        for pair in self._sequence:
            if not _is_zero(pair.value, zero):
                return pair, True
        return KV(None, None if zero is _NO_ZERO else zero), False

    def is_sorted(self) -> bool:
        """
        true if neither keys nor values ever decrease between neighbours.
        each field is checked on its own, so this is not a key-then-value ordering:
        (a, 2) followed by (b, 1) is unsorted.
        """
        prev = None
        for pair in self._sequence:
            if prev is not None and (pair.key < prev.key or pair.value < prev.value):
                return False
            prev = pair
        return True

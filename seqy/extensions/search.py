from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, KVSeq


class SearchAccessor(Generic[T]):
    """
    short-circuiting lookups. positions are 0-based; when nothing matches the
    position reported is the number of elements traversed, i.e. where the value
    would be if it were appended.
    """
    def __init__(self, sequence_instance: 'Seq[T]'):
        self._sequence = sequence_instance

    def contains(self, value: T) -> bool:
        return any(item == value for item in self._sequence)

    def contains_func(self, predicate: Predicate[T]) -> bool:
        """true if any element matches the predicate"""
        return any(predicate(item) for item in self._sequence)

    def find(self, value: T) -> Tuple[int, bool]:
        """(index, True) of the first element equal to value, else (length, False)"""
        _, index, found = self.find_by(lambda item: item == value)
        return index, found

    def find_by(self, predicate: Predicate[T]) -> Tuple[Optional[T], int, bool]:
        """(element, index, True) for the first match, else (None, length, False)"""
        index = 0
        for item in self._sequence:
            if predicate(item):
                return item, index, True
            index += 1
        return None, index, False


class KVSearchAccessor(Generic[K, V]):
    def __init__(self, sequence_instance: 'KVSeq[K, V]'):
        self._sequence = sequence_instance

    def contains(self, key: K, value: V) -> bool:
        """true if the exact pair is present"""
        return any(k == key and v == value for k, v in self._sequence)

    def contains_func(self, predicate: PairPredicate) -> bool:
        return any(predicate(k, v) for k, v in self._sequence)

    def find_by_key(self, key: K) -> Tuple[Optional[V], int, bool]:
        """(value, index, True) of the first pair with this key, else (None, length, False)"""
        index = 0
        for k, v in self._sequence:
            if k == key:
                return v, index, True
            index += 1
        return None, index, False

    def find_by_value(self, value: V) -> Tuple[Optional[K], int, bool]:
        """(key, index, True) of the first pair with this value, else (None, length, False)"""
        index = 0
        for k, v in self._sequence:
            if v == value:
                return k, index, True
            index += 1
        return None, index, False

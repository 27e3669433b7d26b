from __future__ import annotations
import typing
from .. import protocol
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, KVSeq


class CompareAccessor(Generic[T]):
    """lexicographic comparison of this sequence against another, see seqy.protocol"""
    def __init__(self, sequence_instance: 'Seq[T]'):
        self._sequence = sequence_instance

    def compare(self, other: Iterable[T]) -> int:
        """-1, 0 or 1 using natural ordering; a shorter equal prefix sorts first"""
        return protocol.compare(self._sequence, other)

    def compare_func(self, other: Iterable[U], compare: Callable[[T, U], int]) -> int:
        return protocol.compare_func(self._sequence, other, compare)

    def equal(self, other: Iterable[T]) -> bool:
        return protocol.equal(self._sequence, other)

    def equal_func(self, other: Iterable[U], equal: Callable[[T, U], bool]) -> bool:
        return protocol.equal_func(self._sequence, other, equal)


class KVCompareAccessor(Generic[K, V]):
    """comparison of key-value sequences; pairs are ordered by key, then value"""
    def __init__(self, sequence_instance: 'KVSeq[K, V]'):
        self._sequence = sequence_instance

    def compare(self, other: Iterable[Any]) -> int:
        return protocol.compare_kv(self._sequence, other)

    def compare_func(self, other: Iterable[Any], compare: Callable[[KV[K, V], KV], int]) -> int:
        """compare pairwise with compare(this_pair, other_pair); the two sides may differ in types"""
        return protocol.compare_kv_func(self._sequence, other, compare)

    def equal(self, other: Iterable[Any]) -> bool:
        return protocol.equal_kv(self._sequence, other)

    def equal_func(self, other: Iterable[Any], equal: Callable[[KV[K, V], KV], bool]) -> bool:
        return protocol.equal_kv_func(self._sequence, other, equal)

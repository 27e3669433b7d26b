from __future__ import annotations
import typing
from itertools import batched, islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, KVSeq


def _check_chunk_size(size: int) -> None:
    if size <= 0:
        raise ValueError("chunk size must be positive")


class _CoreOperations(Generic[T]):
    def map(self: 'Seq[T]', selector: Selector[T, U]) -> 'Seq[U]':
        """project each element to a new form"""
        from ..sequence import Seq
        def map_data():
            for item in self:
                yield selector(item)
        return Seq(map_data)

    def map_to_kv(self: 'Seq[T]', selector: Callable[[T], Tuple[K, V]]) -> 'KVSeq[K, V]':
        """project each element to a key-value pair"""
        from ..sequence import KVSeq
        def map_kv_data():
            for item in self:
                yield as_kv(selector(item))
        return KVSeq(map_kv_data)

    def with_keys(self: 'Seq[V]', key_selector: KeySelector[V, K]) -> 'KVSeq[K, V]':
        """pair each element with a key; key_selector runs once per element, in order"""
        from ..sequence import KVSeq
        def keyed_data():
            for item in self:
                yield KV(key_selector(item), item)
        return KVSeq(keyed_data)

    def filter(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """keep elements matching the predicate"""
        from ..sequence import Seq
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return Seq(filter_data)

    def drop_by(self: 'Seq[T]', predicate: Predicate[T]) -> 'Seq[T]':
        """remove elements matching the predicate, the opposite of filter"""
        return self.filter(lambda item: not predicate(item))

    def append(self: 'Seq[T]', *items: T) -> 'Seq[T]':
        """yield the sequence, then the extra items"""
        from ..sequence import Seq
        def append_data():
            yield from self
            yield from items
        return Seq(append_data)

    def replace(self: 'Seq[T]', old: T, new: T) -> 'Seq[T]':
        """substitute `new` for every element equal to `old`"""
        return self.map(lambda item: new if item == old else item)

    def compact(self: 'Seq[T]') -> 'Seq[T]':
        """collapse runs of equal adjacent elements to their first occurrence"""
        return self.compact_func(lambda prev, item: prev == item)

    def compact_func(self: 'Seq[T]', equal: Callable[[T, T], bool]) -> 'Seq[T]':
        """like compact, with `equal(previous, current)` deciding whether two neighbours match"""
        from ..sequence import Seq
        def compact_data():
            first = True
            prev = None
            for item in self:
                if first or not equal(prev, item):
                    first = False
                    prev = item
                    yield item
        return Seq(compact_data)

    def chunk(self: 'Seq[T]', size: int) -> 'Seq[Seq[T]]':
        """group consecutive elements into replayable sequences of `size`; the last may be shorter"""
        from ..sequence import Seq
        from ..factories import of
        _check_chunk_size(size)
        def chunk_data():
            for batch in batched(self, size):
                yield of(*batch)
        return Seq(chunk_data)

    def drop(self: 'Seq[T]', count: int) -> 'Seq[T]':
        """skip the first `count` elements"""
        from ..sequence import Seq
        return Seq(lambda: islice(self, max(count, 0), None))

    def take(self: 'Seq[T]', count: int) -> 'Seq[T]':
        """yield at most the first `count` elements"""
        from ..sequence import Seq
        return Seq(lambda: islice(self, max(count, 0)))


class _CoreKVOperations(Generic[K, V]):
    def map(self: 'KVSeq[K, V]', selector: Callable[[K, V], Tuple[K1, V1]]) -> 'KVSeq[K1, V1]':
        """project each pair to a new pair"""
        from ..sequence import KVSeq
        def map_data():
            for key, value in self:
                yield as_kv(selector(key, value))
        return KVSeq(map_data)

    def keys(self: 'KVSeq[K, V]') -> 'Seq[K]':
        """the keys, in order"""
        from ..sequence import Seq
        return Seq(lambda: (pair.key for pair in self))

    def values(self: 'KVSeq[K, V]') -> 'Seq[V]':
        """the values, in order"""
        from ..sequence import Seq
        return Seq(lambda: (pair.value for pair in self))

    def filter(self: 'KVSeq[K, V]', predicate: PairPredicate) -> 'KVSeq[K, V]':
        """keep pairs for which predicate(key, value) holds"""
        from ..sequence import KVSeq
        def filter_data():
            for pair in self:
                if predicate(pair.key, pair.value):
                    yield pair
        return KVSeq(filter_data)

    def drop_by(self: 'KVSeq[K, V]', predicate: PairPredicate) -> 'KVSeq[K, V]':
        """remove pairs for which predicate(key, value) holds"""
        return self.filter(lambda key, value: not predicate(key, value))

    def append(self: 'KVSeq[K, V]', *pairs: Any) -> 'KVSeq[K, V]':
        """yield the sequence, then the extra pairs"""
        from ..sequence import KVSeq
        extra = tuple(as_kv(pair) for pair in pairs)
        def append_data():
            yield from self
            yield from extra
        return KVSeq(append_data)

    def replace(self: 'KVSeq[K, V]', old: Any, new: Any) -> 'KVSeq[K, V]':
        """substitute the pair `new` wherever both key and value equal `old`"""
        from ..sequence import KVSeq
        old, new = as_kv(old), as_kv(new)
        def replace_data():
            for pair in self:
                yield new if pair.key == old.key and pair.value == old.value else pair
        return KVSeq(replace_data)

    def compact(self: 'KVSeq[K, V]') -> 'KVSeq[K, V]':
        """collapse runs of adjacent equal pairs"""
        return self.compact_func(lambda prev, pair: prev.key == pair.key and prev.value == pair.value)

    def compact_func(self: 'KVSeq[K, V]', equal: Callable[[KV[K, V], KV[K, V]], bool]) -> 'KVSeq[K, V]':
        """like compact, with `equal(previous, current)` comparing whole pairs"""
        from ..sequence import KVSeq
        def compact_data():
            prev = None
            for pair in self:
                if prev is None or not equal(prev, pair):
                    prev = pair
                    yield pair
        return KVSeq(compact_data)

    def chunk(self: 'KVSeq[K, V]', size: int) -> 'Seq[KVSeq[K, V]]':
        """group consecutive pairs into replayable key-value sequences of `size`"""
        from ..sequence import Seq
        from ..factories import of_kv
        _check_chunk_size(size)
        def chunk_data():
            for batch in batched(self, size):
                yield of_kv(*batch)
        return Seq(chunk_data)

    def drop(self: 'KVSeq[K, V]', count: int) -> 'KVSeq[K, V]':
        """skip the first `count` pairs"""
        from ..sequence import KVSeq
        return KVSeq(lambda: islice(self, max(count, 0), None))

    def take(self: 'KVSeq[K, V]', count: int) -> 'KVSeq[K, V]':
        """yield at most the first `count` pairs"""
        from ..sequence import KVSeq
        return KVSeq(lambda: islice(self, max(count, 0)))

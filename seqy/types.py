from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
K1 = TypeVar('K1')
V1 = TypeVar('V1')
A = TypeVar('A')
B = TypeVar('B')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
SourceFunc = Callable[[], Iterator[T]]


class KV(NamedTuple, Generic[K, V]):
    """an immutable key-value pair, unpackable as (key, value)"""
    key: K
    value: V


PairPredicate = Callable[[Any, Any], bool]
PairComparer = Callable[[KV, KV], int]


def as_kv(item: Any) -> KV:
    """coerce a 2-tuple into a KV, leaving existing KVs alone"""
    if isinstance(item, KV):
        return item
    try:
        key, value = item
    except (TypeError, ValueError):
        raise TypeError(f"expected a key-value pair, got {item!r}") from None
    return KV(key, value)


def natural_compare(a: Any, b: Any) -> int:
    """three-way comparison using the natural ordering of a and b"""
    if a < b: return -1
    if a > b: return 1
    return 0


def kv_compare(a: KV, b: KV) -> int:
    """orders pairs by key first, then by value"""
    c = natural_compare(a.key, b.key)
    if c != 0:
        return c
    return natural_compare(a.value, b.value)

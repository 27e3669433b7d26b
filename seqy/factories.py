import threading
import typing
from itertools import repeat as _repeat
from .channel import Channel
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq, KVSeq


def of(*values: T) -> 'Seq[T]':
    """create a restartable sequence over the given values"""
    from .sequence import Seq
    return Seq(lambda: iter(values))


def of_kv(*pairs: Any) -> 'KVSeq[Any, Any]':
    """create a restartable key-value sequence; pairs may be KV or any 2-tuple"""
    from .sequence import KVSeq
    items = tuple(as_kv(pair) for pair in pairs)
    return KVSeq(lambda: iter(items))


def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """wrap an iterable; restartable only if `data` can be iterated more than once"""
    from .sequence import Seq
    return Seq(lambda: iter(data))


def from_mapping(data: typing.Mapping[K, V]) -> 'KVSeq[K, V]':
    """key-value sequence over a live view of the mapping's items"""
    from .sequence import KVSeq
    return KVSeq(lambda: (KV(key, value) for key, value in data.items()))


def from_channel(ch: Channel[T]) -> 'Seq[T]':
    """
    values received from the channel until it is closed. the channel is drained
    once, so iterating the sequence again only sees what is still to come.
    """
    from .sequence import Seq
    return Seq(lambda: iter(ch))


def empty() -> 'Seq[Any]':
    """create empty sequence"""
    return of()


def empty_kv() -> 'KVSeq[Any, Any]':
    return of_kv()


def repeat(count: int, item: T) -> 'Seq[T]':
    """create sequence with `item` repeated `count` times"""
    from .sequence import Seq
    return Seq(lambda: _repeat(item, max(count, 0)))


def repeat_kv(count: int, key: K, value: V) -> 'KVSeq[K, V]':
    """create key-value sequence with one pair repeated `count` times"""
    from .sequence import KVSeq
    pair = KV(key, value)
    return KVSeq(lambda: _repeat(pair, max(count, 0)))


def iter_kv(seq: Iterable[V], key_selector: KeySelector[V, K]) -> 'KVSeq[K, V]':
    """pair every value of `seq` with key_selector(value)"""
    return from_iterable(seq).with_keys(key_selector)


def int_key() -> Callable[[Any], int]:
    """
    returns a function that ignores its argument and returns 0, 1, 2, ... on
    successive calls. every call to int_key() starts a new, thread-safe counter.
    """
    lock = threading.Lock()
    last = -1

    def next_key(_value: Any = None) -> int:
        nonlocal last
        with lock:
            last += 1
            return last

    return next_key


# --- aliases ---
S = from_iterable

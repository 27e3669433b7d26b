from __future__ import annotations

from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations, _CoreKVOperations

# --- accessors ---
from .extensions.aggregate import AggregateAccessor, KVAggregateAccessor
from .extensions.search import SearchAccessor, KVSearchAccessor
from .extensions.compare import CompareAccessor, KVCompareAccessor
from .extensions.terminal import TerminalAccessor, KVTerminalAccessor

# --- base sequence implementation ---

class _BaseSequence(Generic[T]):
    def __init__(self, source_func: SourceFunc[T]):
        """init with a function that returns a fresh iterator each time it is called"""
        if not callable(source_func):
            raise TypeError("source_func must be callable")
        self._source_func = source_func

    def __iter__(self) -> Iterator[T]:
        return iter(self._source_func())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self._source_func, '__name__', 'source')})"


# --- single-value sequence ---

class Seq(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazy, restartable-when-its-source-is sequence of values."""
    def __init__(self, source_func: SourceFunc[T]):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.agg = AggregateAccessor(self)
        self.search = SearchAccessor(self)
        self.cmp = CompareAccessor(self)
        self.to = TerminalAccessor(self)

    def each(self, accept: Callable[[T], Optional[bool]]) -> bool:
        """
        push every value into `accept` until it returns False.
        returns True if the sequence was exhausted, False if `accept` stopped it.
        """
        for item in self:
            if accept(item) is False:
                return False
        return True


# --- key-value sequence ---

class KVSeq(
    _BaseSequence[KV[K, V]],
    _CoreKVOperations[K, V]
):
    """a lazy sequence of KV pairs; iterating it yields KV items that unpack as (key, value)."""
    def __init__(self, source_func: SourceFunc[KV[K, V]]):
        super().__init__(source_func)
        self.agg = KVAggregateAccessor(self)
        self.search = KVSearchAccessor(self)
        self.cmp = KVCompareAccessor(self)
        self.to = KVTerminalAccessor(self)

    def each(self, accept: Callable[[K, V], Optional[bool]]) -> bool:
        """push every pair into `accept(key, value)` until it returns False"""
        for key, value in self:
            if accept(key, value) is False:
                return False
        return True

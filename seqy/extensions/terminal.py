from __future__ import annotations
import threading
import typing
import numpy as np
import pandas as pd
from ..channel import Channel, to_channel, to_channel_with_cancel
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq, KVSeq


class TerminalAccessor(Generic[T]):
    """eager conversions; each call iterates the sequence in full"""
    def __init__(self, sequence_instance: 'Seq[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._sequence)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def channel(self, cancel: Optional[threading.Event] = None) -> Channel[T]:
        """
        drive the sequence on a background thread into an unbuffered channel.
        drain the channel, or pass a `cancel` event and set it, or the driver blocks forever.
        """
        if cancel is None:
            return to_channel(self._sequence)
        return to_channel_with_cancel(cancel, self._sequence)


class KVTerminalAccessor(Generic[K, V]):
    def __init__(self, sequence_instance: 'KVSeq[K, V]'):
        self._sequence = sequence_instance

    def list(self) -> List[KV[K, V]]:
        return list(self._sequence)

    def dict(self) -> Dict[K, V]:
        """convert to dictionary; later pairs win on duplicate keys"""
        return {key: value for key, value in self._sequence}

    def pandas(self) -> pd.Series:
        """values as a pandas series indexed by key"""
        pairs = self.list()
        return pd.Series([p.value for p in pairs], index=[p.key for p in pairs])

    def df(self) -> pd.DataFrame:
        """pairs as a two-column dataframe"""
        return pd.DataFrame(self.list(), columns=list(KV._fields))

    def channel(self, cancel: Optional[threading.Event] = None) -> Channel[KV[K, V]]:
        if cancel is None:
            return to_channel(self._sequence)
        return to_channel_with_cancel(cancel, self._sequence)

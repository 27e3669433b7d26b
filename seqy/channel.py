from __future__ import annotations

import logging
import threading
from collections import deque
from .config import get_config
from .types import *

logger = logging.getLogger(__name__)


class ChannelClosedError(Exception):
    """raised when sending on, or closing, a channel that is already closed"""
    pass


class Channel(Generic[T]):
    """
    a closable, thread-safe channel.

    with capacity 0 the channel is a rendezvous: send() does not return until a
    receiver has taken the value. with a positive capacity up to that many values
    can wait in the buffer. recv() on a closed channel drains what is buffered and
    then reports (None, False). interrupt() makes every pending and future send give
    up and return False.
    """

    def __init__(self, capacity: int = 0):
        if capacity < 0:
            raise ValueError("channel capacity must not be negative")
        self._capacity = capacity
        self._buffer: deque = deque()
        self._closed = False
        self._interrupted = False
        self._sent = 0
        self._received = 0
        self._cond = threading.Condition()

    @property
    def capacity(self) -> int: return self._capacity

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    @property
    def interrupted(self) -> bool:
        with self._cond:
            return self._interrupted

    def __len__(self) -> int:
        with self._cond:
            return len(self._buffer)

    def send(self, value: T, cancel: Optional[threading.Event] = None) -> bool:
        """
        send a value, blocking until there is room (or, unbuffered, until it is received).
        returns False without delivering if the channel is interrupted, or `cancel` is
        set, before the value is taken. an Event cannot wake the channel, so a blocked
        send with `cancel` rechecks it every `poll_interval`; interrupt() needs no polling.
        """
        poll = get_config().poll_interval if cancel is not None else None

        def stopped():
            return self._interrupted or (cancel is not None and cancel.is_set())

        with self._cond:
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            if stopped():
                return False

            # wait for a free slot; an unbuffered channel holds at most one pending handoff
            while len(self._buffer) >= max(self._capacity, 1):
                if stopped():
                    return False
                self._cond.wait(poll)
                if self._closed:
                    raise ChannelClosedError("send on closed channel")

            self._buffer.append(value)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()

            if self._capacity > 0:
                return True

            while self._received < ticket:
                cancelled = stopped()
                if cancelled or self._closed:
                    # nobody took it, take it back
                    self._buffer.pop()
                    self._sent -= 1
                    self._cond.notify_all()
                    if not cancelled:
                        raise ChannelClosedError("channel closed during send")
                    return False
                self._cond.wait(poll)
            return True

    def recv(self, timeout: Optional[float] = None) -> Tuple[Optional[T], bool]:
        """
        receive a value. returns (value, True), or (None, False) once the channel is
        closed and drained. raises TimeoutError if `timeout` elapses first.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._buffer or self._closed, timeout):
                raise TimeoutError("timed out waiting on channel")
            if self._buffer:
                value = self._buffer.popleft()
                self._received += 1
                self._cond.notify_all()
                return value, True
            return None, False

    def close(self) -> None:
        """close the channel, waking every blocked sender and receiver"""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def interrupt(self) -> None:
        """make blocked and future sends return False; receivers are unaffected"""
        with self._cond:
            self._interrupted = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            value, ok = self.recv()
            if not ok:
                return
            yield value

    def __repr__(self) -> str:
        state = 'closed' if self._closed else 'open'
        return f"Channel(capacity={self._capacity}, buffered={len(self._buffer)}, {state})"


def spawn_driver(name: str, target: Callable[[], None]) -> threading.Thread:
    """start a background thread named with the configured prefix"""
    config = get_config()
    thread = threading.Thread(target=target, name=f"{config.thread_name_prefix}-{name}",
                              daemon=config.daemon_threads)
    thread.start()
    logger.debug(f"started driver thread {thread.name}")
    return thread


def to_channel(seq: Iterable[T]) -> Channel[T]:
    """
    drive `seq` on a background thread, sending every value into a new unbuffered
    channel and closing it once the sequence is exhausted. the consumer must drain
    the channel, otherwise the driver blocks forever.
    """
    ch: Channel[T] = Channel()

    def drive():
        try:
            for item in seq:
                ch.send(item)
        except Exception:
            logger.error("to_channel driver failed, closing channel", exc_info=True)
        finally:
            ch.close()

    spawn_driver('to-channel', drive)
    return ch


def to_channel_with_cancel(cancel: threading.Event, seq: Iterable[T]) -> Channel[T]:
    """
    like to_channel, but the driver stops and closes the channel as soon as
    `cancel` is set. cancellation is checked before each send and while it blocks.
    """
    ch: Channel[T] = Channel()

    def drive():
        try:
            for item in seq:
                if cancel.is_set():
                    logger.debug("to_channel cancelled before send")
                    return
                if not ch.send(item, cancel=cancel):
                    logger.debug("to_channel cancelled during send")
                    return
        except Exception:
            logger.error("to_channel driver failed, closing channel", exc_info=True)
        finally:
            ch.close()

    spawn_driver('to-channel', drive)
    return ch

import logging
import threading
from dataclasses import dataclass, asdict, replace

logger = logging.getLogger(__name__)

_lock = threading.Lock()


@dataclass(frozen=True)
class SeqyConfig:
    """runtime knobs for the threads seqy starts"""
    poll_interval: float = 0.005  # seconds between checks of an Event passed to a blocked send
    thread_name_prefix: str = 'seqy'
    daemon_threads: bool = True

    def __post_init__(self):
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")


_config = SeqyConfig()


def get_config() -> SeqyConfig:
    """the active configuration"""
    return _config


def configure(**changes) -> SeqyConfig:
    """replace fields of the active configuration and return the new one"""
    global _config
    with _lock:
        _config = replace(_config, **changes)
        logger.debug(f"config: {asdict(_config)}")
        return _config


def reset_config() -> SeqyConfig:
    """restore the defaults"""
    global _config
    with _lock:
        _config = SeqyConfig()
        return _config

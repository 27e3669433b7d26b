"""
'      ___  ___  __ _ _   _
'     / __|/ _ \/ _` | | | |
'     \__ \  __/ (_| | |_| |
'     |___/\___|\__, |\__, |
'                  |_| |___/
"""

# expose the main classes
from .sequence import Seq, KVSeq

# expose the factory functions
from .factories import (
    of,
    of_kv,
    from_iterable,
    from_mapping,
    from_channel,
    empty,
    empty_kv,
    repeat,
    repeat_kv,
    iter_kv,
    int_key,
    S,
)

# ticking sequences
from .clock import every_until, every_n

# channels
from .channel import Channel, ChannelClosedError, to_channel, to_channel_with_cancel

# the comparison protocol as plain functions
from .protocol import (
    compare,
    compare_func,
    compare_kv,
    compare_kv_func,
    equal,
    equal_func,
    equal_kv,
    equal_kv_func,
)

# expose supporting types
from .types import KV, natural_compare, kv_compare

from .config import SeqyConfig, get_config, configure, reset_config

# define what `import *` does
__all__ = [
    "Seq",
    "KVSeq",
    "of",
    "of_kv",
    "from_iterable",
    "from_mapping",
    "from_channel",
    "empty",
    "empty_kv",
    "repeat",
    "repeat_kv",
    "iter_kv",
    "int_key",
    "S",
    "every_until",
    "every_n",
    "Channel",
    "ChannelClosedError",
    "to_channel",
    "to_channel_with_cancel",
    "compare",
    "compare_func",
    "compare_kv",
    "compare_kv_func",
    "equal",
    "equal_func",
    "equal_kv",
    "equal_kv_func",
    "KV",
    "natural_compare",
    "kv_compare",
    "SeqyConfig",
    "get_config",
    "configure",
    "reset_config",
]

"""string-util: small, independent string helpers."""

from .chunking import chunkify
from .randomness import (
    ALPHABET, RandomSource, SystemRandomSource,
    encode_symbols, get_default_source, random_string,
)
from .padding import pad_null, trim_null
from .replace import find_matches, replace_all_async
from .network import is_local_ip_address, match_local_range
from .toolkit import StringToolkit
from .config import create_toolkit, load_config, load_from_yaml
from .errors import StringUtilError, InvalidArgument, RandomSourceUnavailable
from .types import MatchRecord

__all__ = [
    "chunkify",
    "ALPHABET", "RandomSource", "SystemRandomSource",
    "encode_symbols", "get_default_source", "random_string",
    "pad_null", "trim_null",
    "find_matches", "replace_all_async",
    "is_local_ip_address", "match_local_range",
    "StringToolkit",
    "create_toolkit", "load_config", "load_from_yaml",
    "StringUtilError", "InvalidArgument", "RandomSourceUnavailable",
    "MatchRecord",
]
__version__ = "0.1.0"

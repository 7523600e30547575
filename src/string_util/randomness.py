"""Cryptographically secure random identifier strings.

Usage:
    from string_util import random_string

    random_string()          # 20 chars from A-Z a-z 0-9 _ -
    random_string(8)

    # Inject a byte source (tests, HSM-backed sources, ...)
    random_string(8, source=my_source)

Bytes are packed the way base64 packs them: every 3 input bytes become
four 6-bit symbols, each an index into ALPHABET.
"""

from __future__ import annotations
import logging
import secrets
import string
from typing import Protocol

from .errors import RandomSourceUnavailable, check_int

logger = logging.getLogger(__name__)

# Index 0..63; the URL-safe base64 ordering
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "_-"

DEFAULT_LENGTH = 20


class RandomSource(Protocol):
    """Anything that can hand out cryptographically secure bytes."""

    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """The operating system CSPRNG, via :mod:`secrets`."""

    __slots__ = ()

    def __init__(self) -> None:
        # Probe once so a missing entropy provider fails at construction
        try:
            secrets.token_bytes(1)
        except NotImplementedError as e:
            raise RandomSourceUnavailable(
                "no cryptographically secure random source on this platform"
            ) from e

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


# Process-wide singleton, created on first use and never torn down
_default_source: RandomSource | None = None


def get_default_source() -> RandomSource:
    """Return the shared system source, creating it on first call."""
    global _default_source
    if _default_source is None:
        _default_source = SystemRandomSource()
        logger.debug("initialised default random source")
    return _default_source


def bytes_needed(length: int) -> int:
    """Raw bytes required for ``length`` symbols (3 bytes -> 4 symbols)."""
    return -(-length // 4) * 3


def encode_symbols(data: bytes, length: int) -> str:
    """Pack ``data`` into ``length`` alphabet symbols, 6 bits each.

    Stops as soon as ``length`` symbols are out; leftover bytes are ignored.
    """
    check_int("length", length, 0)
    if len(data) < bytes_needed(length):
        raise RandomSourceUnavailable(
            f"need {bytes_needed(length)} bytes for {length} symbols, got {len(data)}",
            {"needed": bytes_needed(length), "received": len(data)},
        )

    out: list[str] = []
    for i in range(0, len(data) - 2, 3):
        b0, b1, b2 = data[i], data[i + 1], data[i + 2]
        for idx in (
            b0 >> 2,
            (b0 & 0x03) << 4 | b1 >> 4,
            (b1 & 0x0F) << 2 | b2 >> 6,
            b2 & 0x3F,
        ):
            if len(out) == length:
                return "".join(out)
            out.append(ALPHABET[idx])
    return "".join(out)


def random_string(length: int = DEFAULT_LENGTH, *, source: RandomSource | None = None) -> str:
    """Generate a random string of ``length`` symbols from ALPHABET.

    Args:
        length: Number of characters; 0 gives "".
        source: Byte source; defaults to the process-wide system CSPRNG.

    Raises:
        InvalidArgument: length is negative or not an integer.
        RandomSourceUnavailable: the source is missing or returned too few bytes.
    """
    check_int("length", length, 0)
    if length == 0:
        return ""
    src = source if source is not None else get_default_source()
    return encode_symbols(src.token_bytes(bytes_needed(length)), length)

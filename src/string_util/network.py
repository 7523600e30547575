"""Lexical private/link-local address check.

Plain pattern matching on the address text: no parsing, no
canonicalisation, no DNS.  Non-canonical spellings (zero-padded octets,
expanded IPv6, integer forms) are not recognised.
"""

from __future__ import annotations
import re

_OCTET = r"\d{1,3}"
_MAPPED = r"(?:::ffff:)?"  # IPv4-mapped IPv6 prefix

# Each pattern: (range_name, compiled_regex).  Any match means local.
LOCAL_ADDRESS_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("IPV6_LOOPBACK", re.compile(r"::1")),

    ("IPV4_PRIVATE_10", re.compile(
        _MAPPED + rf"10\.{_OCTET}\.{_OCTET}\.{_OCTET}", re.IGNORECASE
    )),

    ("IPV4_LOOPBACK", re.compile(
        _MAPPED + rf"127\.{_OCTET}\.{_OCTET}\.{_OCTET}", re.IGNORECASE
    )),

    # 169.254.1.0 - 169.254.254.255; .0.x and .255.x are reserved
    ("IPV4_LINK_LOCAL", re.compile(
        _MAPPED + rf"169\.254\.(?:[1-9]|[1-9]\d|1\d\d|2[0-4]\d|25[0-4])\.{_OCTET}",
        re.IGNORECASE,
    )),

    ("IPV4_PRIVATE_172", re.compile(
        _MAPPED + rf"172\.(?:1[6-9]|2\d|3[01])\.{_OCTET}\.{_OCTET}", re.IGNORECASE
    )),

    ("IPV4_PRIVATE_192", re.compile(
        _MAPPED + rf"192\.168\.{_OCTET}\.{_OCTET}", re.IGNORECASE
    )),

    # fc00::/7
    ("IPV6_UNIQUE_LOCAL", re.compile(
        r"f[cd][0-9a-f]{2}:[0-9a-f:]*", re.IGNORECASE
    )),

    # fe80::/10, optional zone id
    ("IPV6_LINK_LOCAL", re.compile(
        r"fe[89ab][0-9a-f]:[0-9a-f:]*(?:%[\w.]+)?", re.IGNORECASE
    )),
]


def match_local_range(address: str) -> str | None:
    """Return the name of the first local range the address matches, if any."""
    if not isinstance(address, str):
        return None
    for name, pattern in LOCAL_ADDRESS_PATTERNS:
        if pattern.fullmatch(address):
            return name
    return None


def is_local_ip_address(address: str) -> bool:
    """True if address looks like a loopback, private or link-local IP."""
    return match_local_range(address) is not None

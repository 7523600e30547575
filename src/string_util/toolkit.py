"""StringToolkit: the helpers bound to one random source and set of defaults.

Usage:

    kit = StringToolkit.create()
    token = kit.random()                 # configured length
    field = kit.pad_null(token)          # configured block size
    assert kit.trim_null(field) == token

Build one from config with ``string_util.config.create_toolkit``.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .chunking import chunkify
from .errors import check_int
from .network import is_local_ip_address
from .padding import pad_null, trim_null
from .randomness import DEFAULT_LENGTH, RandomSource, get_default_source, random_string
from .replace import AsyncReplacer, replace_all_async


@dataclass
class StringToolkit:
    """Configured front end over the module-level helpers."""

    source: RandomSource
    random_length: int = DEFAULT_LENGTH
    pad_block_size: int = 16
    chunk_length: int = 16

    def __post_init__(self) -> None:
        check_int("random_length", self.random_length, 0)
        check_int("pad_block_size", self.pad_block_size, 1)
        check_int("chunk_length", self.chunk_length, 1)

    @classmethod
    def create(cls, **defaults: int) -> "StringToolkit":
        """Factory: toolkit on the process-wide system source."""
        return cls(source=get_default_source(), **defaults)

    def chunkify(self, text: str, chunk_length: int | None = None) -> list[str]:
        return chunkify(text, self.chunk_length if chunk_length is None else chunk_length)

    def random(self, length: int | None = None) -> str:
        return random_string(
            self.random_length if length is None else length, source=self.source
        )

    def pad_null(self, text: str, length: int | None = None) -> str:
        return pad_null(text, self.pad_block_size if length is None else length)

    def trim_null(self, text: str) -> str:
        return trim_null(text)

    async def replace_all_async(
        self,
        text: str,
        pattern: str | re.Pattern[str],
        replacer: AsyncReplacer,
        *,
        flags: int = 0,
    ) -> str:
        return await replace_all_async(text, pattern, replacer, flags=flags)

    def is_local_ip_address(self, address: str) -> bool:
        return is_local_ip_address(address)

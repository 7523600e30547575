"""Core types."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """A single pattern match, in scan order."""
    text: str
    start: int
    end: int
    groups: tuple[str | None, ...] = ()

    @property
    def length(self) -> int:
        return self.end - self.start

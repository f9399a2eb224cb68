"""Shared type helpers for seed generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence

from .draws import expand_hex_escapes


class RandomSource(Protocol):
    """The subset of ``random.Random`` the pattern rules draw from."""

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, seq: Sequence[Any]) -> Any: ...

    def random(self) -> float: ...

    def randbytes(self, n: int) -> bytes: ...


@dataclass(frozen=True)
class PatternCategory:
    """A named construction rule and how many artifacts to build from it."""

    name: str
    prefix: str
    rule: Callable[[], str]
    count: int
    fallback: str = ""
    allow_empty: bool = False
    expand_escapes: bool = False
    batches: int = 1

    @property
    def total(self) -> int:
        return self.count * self.batches


@dataclass(frozen=True)
class SeedArtifact:
    """Represents a single generated pattern and where it lands on disk."""

    text: str
    category: str
    prefix: str
    ordinal: int
    batch: Optional[int] = None
    expand_escapes: bool = False

    @property
    def filename(self) -> str:
        if self.batch is None:
            return f"{self.prefix}_{self.ordinal}.txt"
        return f"{self.prefix}{self.batch}_{self.ordinal}.txt"

    def payload(self) -> bytes:
        if self.expand_escapes:
            return expand_hex_escapes(self.text) + b"\n"
        return self.text.encode("utf-8") + b"\n"

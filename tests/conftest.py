"""Shared fixtures: a scripted random source for exact rule outputs."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Sequence

import pytest


class ScriptedRandom:
    """Replays fixed draws in order; fails loudly when a script runs dry."""

    def __init__(
        self,
        ints: Iterable[int] = (),
        floats: Iterable[float] = (),
        choices: Iterable[int] = (),
        blobs: Iterable[bytes] = (),
    ):
        self.ints = deque(ints)
        self.floats = deque(floats)
        self.choices = deque(choices)
        self.blobs = deque(blobs)

    def randint(self, a: int, b: int) -> int:
        value = self.ints.popleft()
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[self.choices.popleft()]

    def random(self) -> float:
        return self.floats.popleft()

    def randbytes(self, n: int) -> bytes:
        return self.blobs.popleft()[:n]

    def exhausted(self) -> bool:
        return not (self.ints or self.floats or self.choices or self.blobs)


@pytest.fixture
def scripted():
    return ScriptedRandom

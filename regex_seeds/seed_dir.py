"""Exclusive, scoped ownership of the seed output directory."""

from __future__ import annotations

import logging
from pathlib import Path

from .patterns.types import SeedArtifact

log = logging.getLogger(__name__)


class SeedDirectory:
    """Clears prior seed files on entry and writes one file per artifact.

    Only ``*.txt`` files are removed; anything else a user keeps in the
    directory is left alone.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.written = 0
        self._open = False

    def __enter__(self) -> "SeedDirectory":
        self.path.mkdir(parents=True, exist_ok=True)
        removed = self.clear()
        if removed:
            log.info("Removed %d previous seed files from %s", removed, self.path)
        self.written = 0
        self._open = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._open = False
        log.info("Wrote %d seed files to %s", self.written, self.path)

    # ------------------------------------------------------------------
    def clear(self) -> int:
        removed = 0
        for stale in self.path.glob("*.txt"):
            if stale.is_file():
                stale.unlink()
                removed += 1
        return removed

    def write(self, artifact: SeedArtifact) -> Path:
        if not self._open:
            raise RuntimeError("SeedDirectory.write called outside its 'with' block")
        target = self.path / artifact.filename
        target.write_bytes(artifact.payload())
        self.written += 1
        log.debug("Wrote %s (%d chars)", target.name, len(artifact.text))
        return target

    def file_count(self) -> int:
        return sum(1 for p in self.path.glob("*.txt") if p.is_file())

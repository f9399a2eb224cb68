"""Random byte draws filtered down to a character class, plus escape helpers.

The construction rules never read ``/dev/urandom`` directly: they ask the
injected random source for a block of bytes and keep only the ones that fall
in a class, the same way ``head -c N /dev/urandom | tr -cd CLASS`` would.
"""

from __future__ import annotations

import re
import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import RandomSource


ALPHA = frozenset(string.ascii_letters.encode("ascii"))
ALNUM = frozenset((string.ascii_letters + string.digits).encode("ascii"))
PRINT = frozenset(range(0x20, 0x7F))
CNTRL = frozenset(list(range(0x00, 0x20)) + [0x7F])

_HEX_ESCAPE = re.compile(rb"\\x([0-9a-fA-F]{2})")


def filtered_bytes(rng: "RandomSource", size: int, allowed: frozenset[int], limit: int) -> bytes:
    """Draw ``size`` random bytes, keep those in ``allowed``, cap at ``limit``."""

    if size <= 0 or limit <= 0:
        return b""
    kept = bytes(b for b in rng.randbytes(size) if b in allowed)
    return kept[:limit]


def filtered_text(rng: "RandomSource", size: int, allowed: frozenset[int], limit: int) -> str:
    return filtered_bytes(rng, size, allowed, limit).decode("ascii")


def random_word(rng: "RandomSource", length: int, pool: int = 100, fallback: str = "") -> str:
    """Alphabetic word of at most ``length`` characters, or ``fallback``."""

    word = filtered_text(rng, pool, ALPHA, length)
    return word or fallback


def hex_escape(data: bytes) -> str:
    """Render raw bytes as ``\\xHH`` escape notation."""

    return "".join(f"\\x{b:02x}" for b in data)


def expand_hex_escapes(text: str) -> bytes:
    """Turn ``\\xHH`` sequences back into the bytes they name.

    Anything that is not a complete escape (for instance one cut short by
    truncation) is written through unchanged.
    """

    raw = text.encode("utf-8")
    return _HEX_ESCAPE.sub(lambda m: bytes([int(m.group(1), 16)]), raw)


def splice(base: str, insert: str, position: int) -> str:
    position = max(0, min(position, len(base)))
    return f"{base[:position]}{insert}{base[position:]}"


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length]

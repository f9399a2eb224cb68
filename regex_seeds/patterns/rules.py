"""Per-category construction rules for regex seed patterns."""

from __future__ import annotations

from dataclasses import dataclass
import random

from .draws import (
    ALNUM,
    CNTRL,
    PRINT,
    filtered_bytes,
    filtered_text,
    hex_escape,
    random_word,
    splice,
)
from .tokens import (
    ANCHORS,
    BININSERT_BASE,
    CONDITIONAL_PATTERN,
    CONFLICT_PIECES,
    END_ANCHORS,
    ESCAPES,
    METACHAR_SUFFIXES,
    POSIX_CLASSES,
    SPECIAL_SEQUENCES,
    START_ANCHORS,
    SWEEP_CLASSES,
    SWEEP_TRAILERS,
    ZERO_WIDTH_ASSERTIONS,
)
from .types import RandomSource


@dataclass
class RuleConfig:
    """Configuration knobs for the construction rules."""

    max_pattern_length: int = 1000
    nested_depth: tuple[int, int] = (10, 39)
    long_run_length: tuple[int, int] = (200, 1000)


class PatternRules:
    """Builds one pattern string per call, one method per category."""

    def __init__(self, config: RuleConfig | None = None, rng: RandomSource | None = None):
        self.config = config or RuleConfig()
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    def basic_literals(self) -> str:
        return random_word(self.rng, self.rng.randint(1, 20), fallback="literal")

    def basic_metachar(self) -> str:
        base = random_word(self.rng, self.rng.randint(5, 14), fallback="meta")
        return base + self.rng.choice(METACHAR_SUFFIXES)

    def basic_charclass(self) -> str:
        length = self.rng.randint(5, 24)
        chars = filtered_text(self.rng, 200, ALNUM, length) or "abc"
        pattern = f"[^{chars}]" if self._chance(1 / 2) else f"[{chars}]"
        if self._chance(1 / 3):
            pattern += "+"
        return pattern

    def basic_quantifier(self) -> str:
        return self._bounded_repeat("X", low=(1, 10), spread=(1, 10))

    def basic_anchor(self) -> str:
        pattern = "^" if self._chance(1 / 2) else ""
        pattern += random_word(self.rng, self.rng.randint(3, 12), fallback="anch")
        if self._chance(1 / 2):
            pattern += "$"
        return pattern

    def basic_group(self) -> str:
        word = random_word(self.rng, self.rng.randint(5, 19), pool=200, fallback="grp")
        pattern = f"({word})" if self._chance(1 / 2) else f"(?:{word})"
        if self._chance(1 / 4):
            inner = random_word(self.rng, self.rng.randint(3, 12), fallback="inner")
            pattern = f"({pattern}({inner}))"
        return pattern

    def basic_escape(self) -> str:
        return f"A{self.rng.choice(ESCAPES)}B"

    # ------------------------------------------------------------------
    def complex_long(self) -> str:
        low, high = self.config.long_run_length
        # draw within the maximum so truncation never flattens the lengths
        high = min(high, self.config.max_pattern_length)
        low = min(low, high)
        return "a" * self.rng.randint(low, high)

    def complex_nested(self) -> str:
        low, high = self.config.nested_depth
        depth = self.rng.randint(low, high)
        # keep the chain whole rather than letting truncation unbalance it
        depth = min(depth, max(0, (self.config.max_pattern_length - 1) // 2))
        return "(" * depth + "a" + ")" * depth

    def complex_redos(self) -> str:
        n = self.rng.randint(5, 14)
        alternations = "|".join("a" * x for x in range(1, n + 1))
        return f"({alternations})+$"

    # ------------------------------------------------------------------
    def posix_combo(self) -> str:
        c1, c2, c3 = (self.rng.choice(POSIX_CLASSES) for _ in range(3))
        shape = self.rng.randint(0, 2)
        if shape == 0:
            return f"[{c1}{c2}]+"
        if shape == 1:
            return f"[{c1}{c2}{c3}]+"
        return f"[{c1}{c2}]{{2,4}}"

    def posix_neg(self) -> str:
        pattern = f"[^{self.rng.choice(POSIX_CLASSES)}]"
        if self._chance(1 / 3):
            pattern += "*"
        return pattern

    def anchor_adv(self) -> str:
        parts: list[str] = []
        for _ in range(self.rng.randint(2, 6)):
            parts.append(self.rng.choice(ANCHORS))
            if self._chance(1 / 2):
                parts.append("A")
        return "".join(parts)

    def unicode_pcre(self) -> str:
        prop = self.rng.choice(SPECIAL_SEQUENCES)
        zero_width = self.rng.choice(ZERO_WIDTH_ASSERTIONS)
        return f"A{prop}{zero_width}B"

    def random_bin(self) -> str:
        length = self.rng.randint(50, 249)
        return filtered_text(self.rng, length, PRINT, length // 2) or "binfallback"

    # ------------------------------------------------------------------
    def conflict(self) -> str:
        inserts = self.rng.randint(3, 7)
        stuff = "".join(self.rng.choice(CONFLICT_PIECES) for _ in range(inserts))
        pattern = f"[{stuff}]"
        if self._chance(1 / 3):
            pattern += "+"
        return pattern

    def large_quant(self) -> str:
        return self._bounded_repeat("X", low=(100, 1099), spread=(500, 999))

    def conditional(self) -> str:
        return CONDITIONAL_PATTERN

    def synthetic(self) -> str:
        start = self.rng.choice(START_ANCHORS)
        end = self.rng.choice(END_ANCHORS)
        group = f"({self.rng.choice(POSIX_CLASSES)}+)"
        q = self.rng.randint(1, 5)
        if self._chance(1 / 2):
            group += self.rng.choice(SPECIAL_SEQUENCES)
        return f"{start}{group}{{{q},{q + 5}}}{end}"

    def huge_cat(self) -> str:
        first = self.rng.choice(ANCHORS)
        second = self.rng.choice(ANCHORS)
        cls = f"[{self.rng.choice(SWEEP_CLASSES)}]"
        m = self.rng.randint(1, 10)
        n = m + self.rng.randint(5, 24)
        body = f"{cls}{{{m},{n}}}"
        group = f"({body})" if self._chance(1 / 2) else f"(?:{body})"
        pattern = f"{first}{group}{self.rng.choice(SWEEP_TRAILERS)}{second}"
        if self._chance(1 / 3):
            special = self.rng.choice(SPECIAL_SEQUENCES)
            pattern = splice(pattern, special, self.rng.randint(0, len(pattern)))
        return pattern

    def bininsert(self) -> str:
        length = self.rng.randint(10, 59)
        junk = filtered_bytes(self.rng, length, CNTRL, length) or b"\x00"
        position = self.rng.randint(0, len(BININSERT_BASE))
        return splice(BININSERT_BASE, hex_escape(junk), position)

    # ------------------------------------------------------------------
    def _bounded_repeat(self, atom: str, low: tuple[int, int], spread: tuple[int, int]) -> str:
        m = self.rng.randint(*low)
        n = m + self.rng.randint(*spread)
        if self._chance(1 / 5):
            return f"{atom}{{{m},}}"
        return f"{atom}{{{m},{n}}}"

    def _chance(self, probability: float) -> bool:
        return self.rng.random() < probability

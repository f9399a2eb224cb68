"""Fixed token pools the pattern rules draw from."""

from __future__ import annotations

from typing import Sequence


POSIX_CLASSES: Sequence[str] = (
    "[:alnum:]",
    "[:alpha:]",
    "[:digit:]",
    "[:lower:]",
    "[:upper:]",
    "[:space:]",
    "[:cntrl:]",
    "[:graph:]",
    "[:print:]",
    "[:punct:]",
    "[:xdigit:]",
)

# Unicode property escapes and PCRE-only zero-width tokens.
SPECIAL_SEQUENCES: Sequence[str] = (
    "\\p{Alpha}",
    "\\p{Digit}",
    "\\p{Space}",
    "\\p{Word}",
    "\\G",
    "\\K",
)

ZERO_WIDTH_ASSERTIONS: Sequence[str] = ("\\G", "\\K")

METACHAR_SUFFIXES: Sequence[str] = (
    ".",
    "*",
    "?",
    "+",
    "{2,5}",
    "{0,}",
    "{1,10}",
)

ESCAPES: Sequence[str] = (
    "\\d",
    "\\w",
    "\\s",
    "\\D",
    "\\W",
    "\\S",
    "\\t",
    "\\n",
)

# The empty string is a deliberate member: it lets sequences collapse.
ANCHORS: Sequence[str] = (
    "^",
    "\\A",
    "",
    "\\b",
    "\\B",
    "\\Z",
    "$",
)

START_ANCHORS: Sequence[str] = ("^", "\\A", "")
END_ANCHORS: Sequence[str] = ("$", "\\Z", "")

CONFLICT_PIECES: Sequence[str] = (
    "a-z",
    "Z-A",  # backwards range
    "[:digit:]",
    "^",
)

SWEEP_CLASSES: Sequence[str] = (
    "a-z",
    "A-Z",
    "0-9",
    "[:alpha:]",
    "[:digit:]",
    "[:alnum:]",
)

SWEEP_TRAILERS: Sequence[str] = (".", "+", "?", "*", "{2,}", "|")

CONDITIONAL_PATTERN = "(?(?=[a-z])abc|def)"

BININSERT_BASE = "ABC"

"""The fixed text the fuzzing harness searches with each seed pattern."""

from __future__ import annotations

from pathlib import Path

CORPUS_LINES: tuple[str, ...] = (
    "The quick brown fox jumps over the lazy dog.",
    "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG",
    "abcdefghijklmnopqrstuvwxyz ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "0123456789 3.14159 -42 +7 1e10 0xDEADBEEF",
    "abc def abcdef defabc",
    "ABC AXB A1B A_B A B A\tB",
    "literal meta anch grp inner word boundary",
    "foo@example.com http://example.org/path?q=1&r=2#frag",
    "(nested (groups) here) [brackets] {braces} <angles>",
    "punctuation: !\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~",
    "tabs\tand\tspaces   and trailing   ",
    "a" * 64,
    "a" * 64 + "b",
    "X" * 32,
    "X" * 1200,
    "aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa!",
    "Unicode: café naïve résumé Ωμέγα Привет 日本語 한국어",
    "line with ^caret and $dollar and \\backslash",
    "",
    "end",
)


def corpus_text() -> str:
    """Return the search corpus, one line per entry, newline-terminated."""

    return "\n".join(CORPUS_LINES) + "\n"


def write_corpus(path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(corpus_text())
    return path

"""Category catalog and the sequential seed generator built on top of it."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from typing import Iterable, Iterator, Mapping

from .draws import truncate
from .rules import PatternRules, RuleConfig
from .types import PatternCategory, RandomSource, SeedArtifact

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CategorySpec:
    prefix: str
    label: str
    fallback: str
    allow_empty: bool = False
    expand_escapes: bool = False


# Ordering is fixed so totals and logs are reproducible between runs.
CATEGORY_SPECS: dict[str, _CategorySpec] = {
    "basic_literals": _CategorySpec("literal", "Basic Literal", "literal"),
    "basic_metachar": _CategorySpec("metachar", "Basic Metachar", "meta."),
    "basic_charclass": _CategorySpec("charclass", "Basic Character Class", "[abc]"),
    "basic_quantifier": _CategorySpec("quantifier", "Basic Quantifier", "X{1,2}"),
    "basic_anchor": _CategorySpec("anchor", "Basic Anchor", "anch"),
    "basic_group": _CategorySpec("group", "Basic Group", "(grp)"),
    "basic_escape": _CategorySpec("escape", "Basic Escape", "A\\dB"),
    "complex_long": _CategorySpec("long_overflow", "Complex/Overflow Long", "a"),
    "complex_nested": _CategorySpec("deep_nested", "Deeply Nested Group", "(a)"),
    "complex_redos": _CategorySpec("redos", "ReDoS", "(a|aa)+$"),
    "posix_combo": _CategorySpec("posix_combo", "POSIX Combo", "[[:alpha:][:digit:]]+"),
    "posix_neg": _CategorySpec("posix_neg", "POSIX Negated", "[^[:alpha:]]"),
    "anchor_adv": _CategorySpec("anchor_adv", "Advanced Anchor", "", allow_empty=True),
    "unicode_pcre": _CategorySpec("unicode_pcre", "Unicode/PCRE-like", "A\\p{Alpha}\\GB"),
    "random_bin": _CategorySpec("binary", "Random Binary/ASCII", "binfallback"),
    "conflict": _CategorySpec("conflict", "Conflicting", "[Z-A]"),
    "large_quant": _CategorySpec("large_quant", "Large Quantifier", "X{100,}"),
    "conditional": _CategorySpec("conditional", "Conditional-like", "(?(?=[a-z])abc|def)"),
    "synthetic": _CategorySpec("synthetic", "Synthetic", "^([:alpha:]+){1,6}$"),
    "huge_cat": _CategorySpec("huge_cat", "Huge Category", "^([a-z]{1,6}).$"),
    "bininsert": _CategorySpec("bininsert", "Binary Insertion", "ABC\\x00", expand_escapes=True),
}

DEFAULT_COUNTS: dict[str, int] = {
    "basic_literals": 100,
    "basic_metachar": 100,
    "basic_charclass": 100,
    "basic_quantifier": 100,
    "basic_anchor": 50,
    "basic_group": 50,
    "basic_escape": 50,
    "complex_long": 50,
    "complex_nested": 50,
    "complex_redos": 20,
    "posix_combo": 50,
    "posix_neg": 20,
    "anchor_adv": 50,
    "unicode_pcre": 30,
    "random_bin": 50,
    "conflict": 50,
    "large_quant": 30,
    "conditional": 10,
    "synthetic": 50,
    "huge_cat": 10,  # batches, each of huge_cat_size patterns
    "bininsert": 100,
}

BATCHED_CATEGORIES = frozenset({"huge_cat"})


@dataclass
class GenerationConfig:
    """Run-level configuration: how many of each category, and how long."""

    counts: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_COUNTS))
    max_pattern_length: int = 1000
    huge_cat_size: int = 200
    nested_depth: tuple[int, int] = (10, 39)
    long_run_length: tuple[int, int] = (200, 1000)
    output_dir: str = "grep_fuzz_seeds"
    corpus_path: str = "test_corpus.txt"

    def __post_init__(self) -> None:
        merged = dict(DEFAULT_COUNTS)
        for name, count in self.counts.items():
            if name not in CATEGORY_SPECS:
                raise ValueError(f"Unknown pattern category: {name!r}")
            count = _as_int(f"categories.{name}", count)
            if count <= 0:
                raise ValueError(f"Category {name!r} needs a positive count, got {count}")
            merged[name] = count
        self.counts = merged
        self.max_pattern_length = _as_int("max_pattern_length", self.max_pattern_length)
        self.huge_cat_size = _as_int("huge_cat_size", self.huge_cat_size)
        if self.max_pattern_length <= 0:
            raise ValueError("max_pattern_length must be positive")
        if self.huge_cat_size <= 0:
            raise ValueError("huge_cat_size must be positive")
        self.nested_depth = _as_range("nested_depth", self.nested_depth)
        self.long_run_length = _as_range("long_run_length", self.long_run_length)

    def rule_config(self) -> RuleConfig:
        return RuleConfig(
            max_pattern_length=self.max_pattern_length,
            nested_depth=self.nested_depth,
            long_run_length=self.long_run_length,
        )

    @classmethod
    def from_mapping(cls, data: Mapping) -> "GenerationConfig":
        """Build a config from a loaded YAML mapping, ignoring unrelated keys."""

        kwargs: dict = {}
        if "categories" in data:
            categories = data["categories"] or {}
            if not isinstance(categories, Mapping):
                raise ValueError("'categories' must map category names to counts")
            kwargs["counts"] = dict(categories)
        for key in ("max_pattern_length", "huge_cat_size"):
            if key in data:
                kwargs[key] = _as_int(key, data[key])
        for key in ("nested_depth", "long_run_length"):
            if key in data:
                kwargs[key] = _as_range(key, data[key])
        for key in ("output_dir", "corpus_path"):
            if key in data:
                kwargs[key] = str(data[key])
        return cls(**kwargs)


def _as_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _as_range(name: str, value: Iterable[int]) -> tuple[int, int]:
    try:
        low, high = (int(v) for v in value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a (low, high) pair of integers, got {value!r}") from None
    if low < 0 or high < low:
        raise ValueError(f"{name} must be a non-negative (low, high) range, got {(low, high)}")
    return low, high


def build_catalog(config: GenerationConfig, rules: PatternRules) -> list[PatternCategory]:
    """Bind every configured category to its rule, in catalog order."""

    catalog: list[PatternCategory] = []
    for name, spec in CATEGORY_SPECS.items():
        batched = name in BATCHED_CATEGORIES
        count = config.counts[name]
        catalog.append(
            PatternCategory(
                name=name,
                prefix=spec.prefix,
                rule=getattr(rules, name),
                count=config.huge_cat_size if batched else count,
                fallback=spec.fallback,
                allow_empty=spec.allow_empty,
                expand_escapes=spec.expand_escapes,
                batches=count if batched else 1,
            )
        )
    return catalog


class PatternGenerator:
    """Runs every category in order, yielding finished artifacts."""

    def __init__(
        self,
        config: GenerationConfig | None = None,
        rng: RandomSource | None = None,
    ):
        self.config = config or GenerationConfig()
        self.rng = rng or random.Random()
        self.rules = PatternRules(self.config.rule_config(), self.rng)
        self.catalog = build_catalog(self.config, self.rules)
        self._by_name = {category.name: category for category in self.catalog}

    def expected_total(self) -> int:
        return sum(category.total for category in self.catalog)

    def generate(self) -> Iterator[SeedArtifact]:
        for category in self.catalog:
            yield from self._run_category(category)

    def generate_category(self, name: str) -> Iterator[SeedArtifact]:
        try:
            category = self._by_name[name]
        except KeyError:
            raise ValueError(f"Unknown pattern category: {name!r}") from None
        return self._run_category(category)

    # ------------------------------------------------------------------
    def _run_category(self, category: PatternCategory) -> Iterator[SeedArtifact]:
        log.info("Generating %s Patterns...", CATEGORY_SPECS[category.name].label)
        batches: Iterable[int | None] = [None]
        if category.name in BATCHED_CATEGORIES:
            batches = range(1, category.batches + 1)
        for batch in batches:
            for ordinal in range(1, category.count + 1):
                yield SeedArtifact(
                    text=self.build_pattern(category),
                    category=category.name,
                    prefix=category.prefix,
                    ordinal=ordinal,
                    batch=batch,
                    expand_escapes=category.expand_escapes,
                )

    def build_pattern(self, category: PatternCategory) -> str:
        """Apply one rule, falling back and truncating as needed.

        Any exception from the rule or its random source downgrades to the
        category fallback; one bad draw never aborts the run.
        """

        try:
            text = category.rule()
        except Exception as exc:
            log.warning("Rule %s failed (%s); using fallback pattern", category.name, exc)
            text = category.fallback
        if not text and not category.allow_empty:
            text = category.fallback
        return truncate(text, self.config.max_pattern_length)

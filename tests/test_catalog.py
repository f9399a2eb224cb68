"""Tests for the category catalog, config validation and the generator."""

from collections import Counter
import random
import re

import pytest

from regex_seeds.patterns.catalog import (
    CATEGORY_SPECS,
    DEFAULT_COUNTS,
    GenerationConfig,
    PatternGenerator,
)
from regex_seeds.patterns.tokens import CONDITIONAL_PATTERN
from regex_seeds.patterns.types import PatternCategory


def small_config(**overrides):
    counts = {name: 3 for name in DEFAULT_COUNTS}
    counts["huge_cat"] = 2
    return GenerationConfig(counts=counts, huge_cat_size=4, **overrides)


@pytest.fixture
def artifacts():
    generator = PatternGenerator(small_config(), rng=random.Random(1234))
    return list(generator.generate())


def by_category(artifacts, name):
    return [a.text for a in artifacts if a.category == name]


class TestGenerationConfig:

    def test_default_values(self):
        config = GenerationConfig()
        assert config.counts == DEFAULT_COUNTS
        assert config.max_pattern_length == 1000
        assert config.huge_cat_size == 200
        assert config.output_dir == "grep_fuzz_seeds"

    def test_partial_counts_keep_defaults(self):
        config = GenerationConfig(counts={"conditional": 2})
        assert config.counts["conditional"] == 2
        assert config.counts["basic_literals"] == 100

    def test_unknown_category_rejected(self):
        with pytest.raises(ValueError, match="Unknown pattern category"):
            GenerationConfig(counts={"nope": 1})

    def test_non_positive_count_rejected(self):
        with pytest.raises(ValueError):
            GenerationConfig(counts={"conflict": 0})

    def test_non_positive_max_length_rejected(self):
        with pytest.raises(ValueError):
            GenerationConfig(max_pattern_length=0)

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            GenerationConfig(nested_depth=(20, 10))

    def test_null_count_rejected_as_value_error(self):
        with pytest.raises(ValueError, match="categories.conflict"):
            GenerationConfig.from_mapping({"categories": {"conflict": None}})

    def test_null_max_length_rejected_as_value_error(self):
        with pytest.raises(ValueError, match="max_pattern_length"):
            GenerationConfig.from_mapping({"max_pattern_length": None})

    def test_scalar_range_rejected_as_value_error(self):
        with pytest.raises(ValueError, match="nested_depth"):
            GenerationConfig.from_mapping({"nested_depth": 5})

    def test_from_mapping(self):
        config = GenerationConfig.from_mapping(
            {
                "categories": {"bininsert": 5},
                "max_pattern_length": 64,
                "nested_depth": [2, 4],
                "output_dir": "seeds",
                "seed": 3,
            }
        )
        assert config.counts["bininsert"] == 5
        assert config.max_pattern_length == 64
        assert config.nested_depth == (2, 4)
        assert config.output_dir == "seeds"


class TestCatalog:

    def test_catalog_follows_fixed_order(self):
        generator = PatternGenerator(rng=random.Random(0))
        assert [c.name for c in generator.catalog] == list(CATEGORY_SPECS)

    def test_expected_total_for_defaults(self):
        generator = PatternGenerator(rng=random.Random(0))
        assert generator.expected_total() == 1110 + 10 * 200

    def test_unknown_category_lookup(self):
        generator = PatternGenerator(rng=random.Random(0))
        with pytest.raises(ValueError):
            generator.generate_category("missing")


class TestGeneratedArtifacts:

    def test_every_category_emits_its_count(self, artifacts):
        counts = Counter(a.category for a in artifacts)
        for name in DEFAULT_COUNTS:
            expected = 2 * 4 if name == "huge_cat" else 3
            assert counts[name] == expected, name

    def test_filenames_are_unique(self, artifacts):
        names = [a.filename for a in artifacts]
        assert len(names) == len(set(names))
        assert "literal_1.txt" in names
        assert "huge_cat2_4.txt" in names

    def test_lengths_within_maximum(self):
        config = small_config(max_pattern_length=12)
        generator = PatternGenerator(config, rng=random.Random(99))
        assert all(len(a.text) <= 12 for a in generator.generate())

    def test_nothing_empty_except_anchor_adv(self, artifacts):
        for artifact in artifacts:
            if artifact.category != "anchor_adv":
                assert artifact.text, artifact.filename

    def test_literals_are_alphabetic(self, artifacts):
        for text in by_category(artifacts, "basic_literals"):
            assert text.isalpha() and text.isascii()
            assert 1 <= len(text) <= 20

    def test_quantifier_bounds_ordered(self, artifacts):
        for text in by_category(artifacts, "basic_quantifier"):
            m, n = re.fullmatch(r"X\{(\d+),(\d*)\}", text).groups()
            assert not n or int(n) >= int(m)

    def test_large_quant_shape(self, artifacts):
        for text in by_category(artifacts, "large_quant"):
            m, n = re.fullmatch(r"X\{(\d+),(\d*)\}", text).groups()
            assert 100 <= int(m) <= 1099
            assert not n or int(n) > int(m)

    def test_negation_marker_once_after_bracket(self, artifacts):
        negated = [t for t in by_category(artifacts, "basic_charclass") if t.startswith("[^")]
        negated += by_category(artifacts, "posix_neg")
        for text in negated:
            assert text.startswith("[^")
            assert text.count("^") == 1

    def test_nested_groups_balanced(self, artifacts):
        for text in by_category(artifacts, "complex_nested"):
            assert text.count("(") == text.count(")")

    def test_conditional_is_literal(self, artifacts):
        assert set(by_category(artifacts, "conditional")) == {CONDITIONAL_PATTERN}

    def test_only_bininsert_expands_escapes(self, artifacts):
        flagged = {a.category for a in artifacts if a.expand_escapes}
        assert flagged == {"bininsert"}

    def test_same_seed_same_output(self):
        first = [a.text for a in PatternGenerator(small_config(), rng=random.Random(7)).generate()]
        second = [a.text for a in PatternGenerator(small_config(), rng=random.Random(7)).generate()]
        assert first == second


class TestBuildPattern:

    def _category(self, rule, **kwargs):
        return PatternCategory(name="probe", prefix="probe", rule=rule, count=1, **kwargs)

    def test_failing_rule_uses_fallback(self):
        def broken():
            raise ValueError("boom")

        generator = PatternGenerator(rng=random.Random(0))
        assert generator.build_pattern(self._category(broken, fallback="safe")) == "safe"

    def test_empty_result_uses_fallback(self):
        generator = PatternGenerator(rng=random.Random(0))
        assert generator.build_pattern(self._category(lambda: "", fallback="safe")) == "safe"

    def test_empty_allowed_when_intentional(self):
        generator = PatternGenerator(rng=random.Random(0))
        category = self._category(lambda: "", fallback="safe", allow_empty=True)
        assert generator.build_pattern(category) == ""

    def test_long_result_truncated(self):
        generator = PatternGenerator(GenerationConfig(max_pattern_length=5), rng=random.Random(0))
        assert generator.build_pattern(self._category(lambda: "abcdefgh")) == "abcde"

    def test_any_rule_error_uses_fallback(self):
        def dry():
            raise RuntimeError("random source exhausted")

        generator = PatternGenerator(rng=random.Random(0))
        assert generator.build_pattern(self._category(dry, fallback="safe")) == "safe"

    def test_default_long_runs_vary_in_length(self):
        generator = PatternGenerator(rng=random.Random(2))
        lengths = {len(a.text) for a in generator.generate_category("complex_long")}
        assert len(lengths) > 1
        assert max(lengths) <= 1000

    def test_long_run_category_truncated(self):
        config = GenerationConfig(counts={"complex_long": 2}, max_pattern_length=50)
        generator = PatternGenerator(config, rng=random.Random(0))
        texts = [a.text for a in generator.generate_category("complex_long")]
        assert texts == ["a" * 50, "a" * 50]

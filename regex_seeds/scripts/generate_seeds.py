"""CLI for building a regex fuzzing seed corpus.

Usage:
    regex-seeds --output-dir grep_fuzz_seeds --corpus test_corpus.txt
    afl-fuzz -i grep_fuzz_seeds -o afl_output -- ./grep -E -f @@ test_corpus.txt
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import random
from typing import Sequence

import yaml

from regex_seeds.patterns.catalog import GenerationConfig, PatternGenerator
from regex_seeds.patterns.corpus import write_corpus
from regex_seeds.seed_dir import SeedDirectory

log = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--output-dir", type=Path, default=Path("grep_fuzz_seeds"))
    parser.add_argument("--corpus", type=Path, default=Path("test_corpus.txt"))
    parser.add_argument("--seed", type=int, help="Seed the random source for a reproducible corpus")
    parser.add_argument("--max-length", type=int, default=1000)
    parser.add_argument("--config", type=Path, help="Optional YAML config overriding CLI flags")
    parser.add_argument("--no-corpus", action="store_true", help="Skip writing the search corpus")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s  %(message)s",
    )
    cfg = load_config(args.config)
    config = build_config(args, cfg)

    seed = cfg.get("seed") if cfg.get("seed") is not None else args.seed
    rng = random.Random(int(seed)) if seed is not None else random.Random()

    generator = PatternGenerator(config, rng=rng)
    log.info("Starting seed generation (%d patterns expected)...", generator.expected_total())
    with SeedDirectory(config.output_dir) as seeds:
        for artifact in generator.generate():
            seeds.write(artifact)
        total = seeds.file_count()

    if not args.no_corpus:
        corpus = write_corpus(config.corpus_path)
        log.info("Search corpus written to %s", corpus)

    print(f"Wrote {total} seed files to {config.output_dir}")
    return 0


def load_config(path: Path | None) -> dict:
    if not path:
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("Config file must define a YAML mapping")
    return data


def build_config(args: argparse.Namespace, cfg: dict) -> GenerationConfig:
    """Merge CLI flags with the YAML mapping; YAML keys win."""

    merged = {
        "output_dir": str(args.output_dir),
        "corpus_path": str(args.corpus),
        "max_pattern_length": args.max_length,
    }
    merged.update(cfg)
    return GenerationConfig.from_mapping(merged)


if __name__ == "__main__":
    raise SystemExit(main())

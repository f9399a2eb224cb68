"""Pattern construction utilities for regex fuzzing seeds."""

from .catalog import GenerationConfig, PatternGenerator
from .types import PatternCategory, SeedArtifact
from . import corpus

__all__ = ["GenerationConfig", "PatternGenerator", "PatternCategory", "SeedArtifact", "corpus"]

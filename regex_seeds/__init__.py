"""Seed corpus generator for fuzzing regex engines."""

__version__ = "0.1.0"

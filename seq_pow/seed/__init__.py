"""Seed and difficulty derivation module."""

from .SeedDerivation import SeedDerivation

__all__ = ["SeedDerivation"]

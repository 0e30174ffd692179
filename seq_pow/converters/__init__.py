"""Converters for serialized and stored VDF solutions."""

from .VdfSolutionConverter import VdfSolutionConverter

__all__ = ["VdfSolutionConverter"]

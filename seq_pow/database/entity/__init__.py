"""Database entity models."""

from .VdfProofEntity import VdfProofEntity

__all__ = ["VdfProofEntity"]

"""Fiat-Shamir transcript module."""

from .TranscriptHasher import TranscriptHasher

__all__ = ["TranscriptHasher"]

"""Utility modules for seq_pow."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .Logging import configure_logging

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables", "configure_logging"]

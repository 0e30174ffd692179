"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of worker processes for batch evaluation and verification.

        Returns the number of CPU cores divided by the parallelization divisor,
        with a minimum of 1. The divisor is read from PARALLELISM_DIVISOR
        (default 2); values below 1 are treated as 1.

        Returns:
            int: Number of parallel processes to use
        """
        parallelism_divisor = max(
            EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR), 1
        )
        return multiprocessing.cpu_count() // parallelism_divisor or 1 # default to 1 if only 1 core available

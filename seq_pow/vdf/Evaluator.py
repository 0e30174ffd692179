import logging
import time
from multiprocessing import Pool
from typing import List, Optional, Sequence

from ..group import GroupParameters, Modulus
from ..mpc import MPC
from ..mpc.types import IntegerLike
from ..seed import SeedDerivation
from ..utils import EnvironmentManager, EnvironmentVariables, SystemSpecs
from ..vrf.abstract.IVrfPublicKey import IVrfPublicKey
from .CancellationToken import CancellationToken
from .HalvingProtocol import HalvingProtocol, TWO
from .abstract.IEvaluator import IEvaluator, EvaluationInstance
from .results import EvaluationResult

logger = logging.getLogger(__name__)


class Evaluator(IEvaluator):
    """Sequential squaring evaluator.

    Each squaring depends on the previous one, which is what makes the
    computation a delay: it cannot be split across cores.
    """

    @staticmethod
    def evaluate(
        modulus: Modulus,
        g: IntegerLike,
        t: int,
        pubkey: IVrfPublicKey,
        target: IntegerLike,
        cancellation: Optional[CancellationToken] = None,
    ) -> EvaluationResult:
        group = GroupParameters.coerce(modulus)
        N = group.get_N()
        x = group.element(g)
        t = HalvingProtocol.validate_steps(t)
        progress_interval = EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_INTERVAL)

        logger.debug("Evaluating %d squarings over a %d-bit modulus", t, N.bit_length())
        start_time = time.perf_counter()
        for step in range(t):
            if cancellation is not None:
                cancellation.raise_if_cancelled(step)
            x = MPC.powmod(x, TWO, N)
            if progress_interval > 0 and (step + 1) % progress_interval == 0:
                logger.debug("Completed %d of %d squarings", step + 1, t)

        meets_difficulty = SeedDerivation.meets_target(
            SeedDerivation.difficulty_hash(group, pubkey, x), target
        )
        logger.debug(
            "Evaluation of %d squarings took %.4f seconds (meets difficulty: %s)",
            t, time.perf_counter() - start_time, meets_difficulty,
        )
        return EvaluationResult(x, meets_difficulty)

    @staticmethod
    def evaluate_many(instances: Sequence[EvaluationInstance]) -> List[EvaluationResult]:
        """
        Evaluate multiple independent instances in parallel using multiprocessing.

        Args:
            instances: List of (modulus, g, t, pubkey, target) tuples

        Returns:
            List of results in the same order as the input instances
        """
        if not instances:
            return []
        num_workers = min(SystemSpecs.get_num_parallel_processes(), len(instances))
        with Pool(num_workers) as pool:
            return pool.map(Evaluator._evaluate_single, instances)

    # Private Methods
    # --------------

    @staticmethod
    def _evaluate_single(args: EvaluationInstance) -> EvaluationResult:
        """Helper method to evaluate a single instance for multiprocessing."""
        modulus, g, t, pubkey, target = args
        return Evaluator.evaluate(modulus, g, t, pubkey, target)

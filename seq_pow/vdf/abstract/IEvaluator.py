from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ...group import Modulus
from ...mpc.types import IntegerLike
from ...vrf.abstract.IVrfPublicKey import IVrfPublicKey
from ..CancellationToken import CancellationToken
from ..results import EvaluationResult

EvaluationInstance = Tuple[Modulus, IntegerLike, int, IVrfPublicKey, IntegerLike]


class IEvaluator(ABC):
    """Abstract base class defining the interface for the sequential squaring evaluator."""

    @staticmethod
    @abstractmethod
    def evaluate(
        modulus: Modulus,
        g: IntegerLike,
        t: int,
        pubkey: IVrfPublicKey,
        target: IntegerLike,
        cancellation: Optional[CancellationToken] = None,
    ) -> EvaluationResult:
        """Compute y = g^(2^t) mod N by t sequential squarings.

        Args:
            modulus (Modulus): The group modulus N
            g (IntegerLike): Start element in [0, N)
            t (int): Number of squarings, t >= 0
            pubkey (IVrfPublicKey): Prover's VRF public key
            target (IntegerLike): Difficulty target
            cancellation (Optional[CancellationToken]): Checked once per squaring

        Returns:
            EvaluationResult: The output y and whether it meets the target
        """

    @staticmethod
    @abstractmethod
    def evaluate_many(instances: Sequence[EvaluationInstance]) -> List[EvaluationResult]:
        """Evaluate independent instances in parallel using multiprocessing.

        Args:
            instances: List of (modulus, g, t, pubkey, target) tuples

        Returns:
            List[EvaluationResult]: Results in the same order as the input
        """

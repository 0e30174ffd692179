from abc import ABC, abstractmethod
from typing import List, Optional

from ...group import Modulus
from ...mpc.types import MPZ, IntegerLike
from ..CancellationToken import CancellationToken


class IProofGenerator(ABC):
    """Abstract base class defining the interface for the halving proof generator."""

    @staticmethod
    @abstractmethod
    def generate_proof(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        cancellation: Optional[CancellationToken] = None,
    ) -> List[MPZ]:
        """Produce the midpoints that let a verifier check y = g^(2^t) mod N.

        Args:
            modulus (Modulus): The group modulus N
            g (IntegerLike): Start element in [0, N)
            y (IntegerLike): Output of the evaluator for the same g and t
            t (int): Number of squarings
            cancellation (Optional[CancellationToken]): Checked once per round

        Returns:
            List[MPZ]: One midpoint per halving round, round 0 first
        """

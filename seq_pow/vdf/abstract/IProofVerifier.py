from abc import ABC, abstractmethod
from typing import List, Sequence

from ...group import Modulus
from ...mpc.types import IntegerLike
from ...vrf.abstract.IVrfPublicKey import IVrfPublicKey
from ..VdfSolution import VdfSolution
from ..results import VerificationResult


class IProofVerifier(ABC):
    """Abstract base class defining the interface for the halving proof verifier."""

    @staticmethod
    @abstractmethod
    def verify_proof(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        proof: Sequence[IntegerLike],
        pubkey: IVrfPublicKey,
        target: IntegerLike,
    ) -> bool:
        """Accept iff the proof replays correctly and y meets the target.

        Args:
            modulus (Modulus): The group modulus N
            g (IntegerLike): Start element
            y (IntegerLike): Claimed output
            t (int): Claimed number of squarings
            proof (Sequence[IntegerLike]): Midpoints, round 0 first
            pubkey (IVrfPublicKey): Prover's VRF public key
            target (IntegerLike): Difficulty target

        Returns:
            bool: True if both acceptance gates pass
        """

    @staticmethod
    @abstractmethod
    def verify(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        proof: Sequence[IntegerLike],
        pubkey: IVrfPublicKey,
        target: IntegerLike,
    ) -> VerificationResult:
        """Evaluate both acceptance gates and report them separately.

        Returns:
            VerificationResult: (proof_valid, meets_difficulty)
        """

    @staticmethod
    @abstractmethod
    def verify_many(
        solutions: Sequence[VdfSolution], pubkey: IVrfPublicKey, target: IntegerLike
    ) -> List[bool]:
        """Verify independent solutions in parallel using multiprocessing.

        Args:
            solutions: Solutions to verify
            pubkey: Prover's VRF public key
            target: Difficulty target

        Returns:
            List[bool]: Verdicts in the same order as the input
        """

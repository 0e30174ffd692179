import logging
from multiprocessing import Pool
from typing import List, Sequence, Tuple

from ..group import GroupParameters, Modulus
from ..mpc import MPC
from ..mpc.types import IntegerLike
from ..seed import SeedDerivation
from ..utils import SystemSpecs
from ..vrf.abstract.IVrfPublicKey import IVrfPublicKey
from .HalvingProtocol import HalvingProtocol, TWO
from .VdfSolution import VdfSolution
from .abstract.IProofVerifier import IProofVerifier
from .results import VerificationResult

logger = logging.getLogger(__name__)


class ProofVerifier(IProofVerifier):
    """Pietrzak halving proof verifier.

    Verification costs O(log t) modular exponentiations against O(t)
    squarings for evaluation. A rejected proof is reported as False; only
    broken public parameters (N <= 1, t < 0) raise.
    """

    @staticmethod
    def verify_proof(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        proof: Sequence[IntegerLike],
        pubkey: IVrfPublicKey,
        target: IntegerLike,
    ) -> bool:
        return ProofVerifier.verify(modulus, g, y, t, proof, pubkey, target).accepted

    @staticmethod
    def verify(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        proof: Sequence[IntegerLike],
        pubkey: IVrfPublicKey,
        target: IntegerLike,
    ) -> VerificationResult:
        group = GroupParameters.coerce(modulus)
        t = HalvingProtocol.validate_steps(t)

        meets_difficulty = ProofVerifier.check_difficulty(group, y, pubkey, target)
        proof_valid = ProofVerifier.verify_transcript(group, g, y, t, proof)
        result = VerificationResult(proof_valid, meets_difficulty)
        if not result.accepted:
            logger.debug(
                "Rejected proof for %d squarings (proof valid: %s, meets difficulty: %s)",
                t, proof_valid, meets_difficulty,
            )
        return result

    @staticmethod
    def check_difficulty(
        modulus: Modulus, y: IntegerLike, pubkey: IVrfPublicKey, target: IntegerLike
    ) -> bool:
        """Difficulty gate: the claimed output's hash must not exceed the target.

        Returns:
            bool: False for an out-of-range y instead of raising
        """
        group = GroupParameters.coerce(modulus)
        if not group.contains(y):
            return False
        return SeedDerivation.meets_target(SeedDerivation.difficulty_hash(group, pubkey, y), target)

    @staticmethod
    def verify_transcript(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        proof: Sequence[IntegerLike],
    ) -> bool:
        """Transcript gate: replay the halving rounds with the supplied midpoints.

        Args:
            modulus (Modulus): The group modulus N
            g (IntegerLike): Start element
            y (IntegerLike): Claimed output
            t (int): Claimed number of squarings
            proof (Sequence[IntegerLike]): Midpoints, round 0 first

        Returns:
            bool: True iff the proof has the expected length, every element is
                in range, and the final claim y = x^2 holds
        """
        group = GroupParameters.coerce(modulus)
        N = group.get_N()
        t_i = HalvingProtocol.validate_steps(t)
        proof = list(proof)

        if not (group.contains(g) and group.contains(y)):
            return False
        if len(proof) != HalvingProtocol.round_count(t_i):
            return False
        if not all(group.contains(mu) for mu in proof):
            return False
        if t_i == 0:
            return MPC.mpz(g) == MPC.mpz(y)

        x_i, y_i = MPC.mpz(g), MPC.mpz(y)
        t_i, y_i = HalvingProtocol.compensate(group, t_i, y_i)
        for mu in proof:
            mu_i = MPC.mpz(mu)
            x_i, y_i = HalvingProtocol.fold(group, x_i, y_i, mu_i)
            t_i, y_i = HalvingProtocol.compensate(group, t_i // 2, y_i)

        return y_i == MPC.powmod(x_i, TWO, N)

    @staticmethod
    def verify_many(
        solutions: Sequence[VdfSolution], pubkey: IVrfPublicKey, target: IntegerLike
    ) -> List[bool]:
        """
        Verify multiple independent solutions in parallel using multiprocessing.

        Args:
            solutions: Solutions to verify
            pubkey: Prover's VRF public key
            target: Difficulty target

        Returns:
            List of verdicts in the same order as the input solutions
        """
        if not solutions:
            return []
        tasks = [(solution, pubkey, target) for solution in solutions]
        num_workers = min(SystemSpecs.get_num_parallel_processes(), len(tasks))
        with Pool(num_workers) as pool:
            return pool.map(ProofVerifier._verify_single, tasks)

    # Private Methods
    # --------------

    @staticmethod
    def _verify_single(args: Tuple[VdfSolution, IVrfPublicKey, IntegerLike]) -> bool:
        """Helper method to verify a single solution for multiprocessing."""
        solution, pubkey, target = args
        return ProofVerifier.verify_proof(
            solution.get_group(),
            solution.get_g(),
            solution.get_y(),
            solution.get_t(),
            solution.get_proof(),
            pubkey,
            target,
        )

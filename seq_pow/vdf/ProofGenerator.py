import logging
from typing import List, Optional

from ..group import GroupParameters, Modulus
from ..mpc import MPC
from ..mpc.types import MPZ, IntegerLike
from .CancellationToken import CancellationToken
from .HalvingProtocol import HalvingProtocol, TWO
from .abstract.IProofGenerator import IProofGenerator

logger = logging.getLogger(__name__)


class ProofGenerator(IProofGenerator):
    """Pietrzak halving proof generator."""

    @staticmethod
    def generate_proof(
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        cancellation: Optional[CancellationToken] = None,
    ) -> List[MPZ]:
        """Produce the midpoints that let a verifier check y = g^(2^t) mod N.

        The prover must already know y. Each round computes the true midpoint
        of the current claim, derives the challenge from (x, y, mu) and folds
        the claim in half, so the proof has HalvingProtocol.round_count(t)
        entries.

        Args:
            modulus (Modulus): The group modulus N
            g (IntegerLike): Start element in [0, N)
            y (IntegerLike): Output of the evaluator for the same g and t
            t (int): Number of squarings
            cancellation (Optional[CancellationToken]): Checked once per round

        Returns:
            List[MPZ]: One midpoint per halving round, round 0 first

        Raises:
            InvalidParameterError: If g or y is outside [0, N) or t < 0
            EvaluationCancelled: If the token is cancelled between rounds
        """
        group = GroupParameters.coerce(modulus)
        N = group.get_N()
        x_i = group.element(g)
        y_i = group.element(y)
        t_i = HalvingProtocol.validate_steps(t)

        t_i, y_i = HalvingProtocol.compensate(group, t_i, y_i)
        proof: List[MPZ] = []
        while t_i > 1:
            if cancellation is not None:
                cancellation.raise_if_cancelled(len(proof))
            half = t_i // 2
            mu_i = MPC.powmod(x_i, MPC.pow(TWO, half), N)
            proof.append(mu_i)
            x_i, y_i = HalvingProtocol.fold(group, x_i, y_i, mu_i)
            t_i, y_i = HalvingProtocol.compensate(group, half, y_i)

        logger.debug("Generated %d-round proof for %d squarings", len(proof), t)
        return proof

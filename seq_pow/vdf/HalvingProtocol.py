from typing import List, Tuple

from ..errors import InvalidParameterError
from ..group import GroupParameters
from ..mpc import MPC
from ..mpc.types import MPZ
from ..transcript import TranscriptHasher

TWO = MPC.mpz(2)


class HalvingProtocol:
    """Round structure shared by the prover and the verifier.

    Every round starts from a claim y = x^(2^t) with t even. The midpoint
    mu = x^(2^(t/2)) splits it into two claims of length t/2 which are merged
    with a Fiat-Shamir challenge r into the single claim
    (x^r * mu)^(2^(t/2)) = mu^r * y. When t/2 is odd it is bumped to t/2 + 1
    and y is squared once, which keeps the next round even. The same
    adjustment is applied to the initial claim when T itself is odd. The
    chain ends at t = 1, where the claim y = x^2 is checked directly.
    """

    @staticmethod
    def validate_steps(t: int) -> int:
        """Check a step count and return it as a plain int.

        Raises:
            InvalidParameterError: If t is not an integer or is negative
        """
        if not MPC.is_integer(t):
            raise InvalidParameterError(f"Step count must be an integer, got {type(t).__name__}")
        if t < 0:
            raise InvalidParameterError(f"Step count must be non-negative, got {t}")
        return int(t)

    @staticmethod
    def needs_compensation(t: int) -> bool:
        return t % 2 == 1 and t != 1

    @staticmethod
    def compensate(group: GroupParameters, t: int, y: MPZ) -> Tuple[int, MPZ]:
        """Make an odd remaining length even by squaring the claimed output.

        Args:
            group (GroupParameters): The group
            t (int): Remaining step count
            y (MPZ): Claimed output for t steps

        Returns:
            Tuple[int, MPZ]: (t + 1, y^2) if t is odd and not 1, else (t, y)
        """
        if HalvingProtocol.needs_compensation(t):
            return t + 1, MPC.powmod(y, TWO, group.get_N())
        return t, y

    @staticmethod
    def fold(group: GroupParameters, x: MPZ, y: MPZ, mu: MPZ) -> Tuple[MPZ, MPZ]:
        """Merge the two half claims (x, mu) and (mu, y) into one.

        Args:
            group (GroupParameters): The group
            x (MPZ): Current start element
            y (MPZ): Current claimed output
            mu (MPZ): Midpoint for this round

        Returns:
            Tuple[MPZ, MPZ]: The folded (x, y)
        """
        N = group.get_N()
        r = TranscriptHasher.challenge(group, (x, y, mu))
        x_next = MPC.mulmod(MPC.powmod(x, r, N), mu, N)
        y_next = MPC.mulmod(MPC.powmod(mu, r, N), y, N)
        return x_next, y_next

    @staticmethod
    def schedule(t: int) -> List[int]:
        """List the (even) remaining step count at the start of every round.

        Args:
            t (int): Total step count T

        Returns:
            List[int]: One entry per round, so len() is the proof length
        """
        t = HalvingProtocol.validate_steps(t)
        rounds = []
        if HalvingProtocol.needs_compensation(t):
            t += 1
        while t > 1:
            rounds.append(t)
            t //= 2
            if HalvingProtocol.needs_compensation(t):
                t += 1
        return rounds

    @staticmethod
    def round_count(t: int) -> int:
        """Number of midpoints a proof for T steps carries."""
        return len(HalvingProtocol.schedule(t))

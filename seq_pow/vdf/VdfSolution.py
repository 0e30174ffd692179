from typing import Iterable, Tuple

from ..group import GroupParameters, Modulus
from ..mpc import MPC
from ..mpc.types import MPZ, IntegerLike


class VdfSolution:
    """A solved VDF instance: start g, output y after t squarings, and the proof."""

    __slots__ = ("_group", "_g", "_y", "_t", "_proof")

    def __init__(
        self,
        modulus: Modulus,
        g: IntegerLike,
        y: IntegerLike,
        t: int,
        proof: Iterable[IntegerLike],
    ) -> None:
        """Initialize a solution.

        The values are stored as given; whether they form a valid proof is
        for ProofVerifier to decide.

        Args:
            modulus (Modulus): The group modulus N
            g (IntegerLike): Start element
            y (IntegerLike): Claimed output
            t (int): Number of squarings
            proof (Iterable[IntegerLike]): Midpoints, round 0 first
        """
        self._group = GroupParameters.coerce(modulus)
        self._g = MPC.mpz(g)
        self._y = MPC.mpz(y)
        self._t = int(t)
        self._proof = tuple(MPC.mpz(mu) for mu in proof)

    def get_group(self) -> GroupParameters:
        return self._group

    def get_N(self) -> MPZ:
        return self._group.get_N()

    def get_g(self) -> MPZ:
        return self._g

    def get_y(self) -> MPZ:
        return self._y

    def get_t(self) -> int:
        return self._t

    def get_proof(self) -> Tuple[MPZ, ...]:
        return self._proof

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VdfSolution):
            return NotImplemented
        return (
            self._group == other._group
            and self._g == other._g
            and self._y == other._y
            and self._t == other._t
            and self._proof == other._proof
        )

    def __hash__(self) -> int:
        return hash((self._group, int(self._g), int(self._y), self._t, tuple(int(mu) for mu in self._proof)))

    def __getstate__(self):
        return {
            "group": self._group,
            "g": self._g,
            "y": self._y,
            "t": self._t,
            "proof": self._proof,
        }

    def __setstate__(self, state) -> None:
        self._group = state["group"]
        self._g = state["g"]
        self._y = state["y"]
        self._t = state["t"]
        self._proof = state["proof"]

    def __repr__(self):
        return f"<VdfSolution(t={self._t}, rounds={len(self._proof)}, bits={self.get_N().bit_length()})>"

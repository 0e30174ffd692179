from typing import Union

from ..errors import InvalidParameterError
from ..mpc import MPC
from ..mpc.types import MPZ, IntegerLike
from .abstract.IGroupParameters import IGroupParameters


class GroupParameters(IGroupParameters):
    """The public modulus N of the squaring group.

    N is treated as an opaque odd composite of unknown factorization. It is
    validated once on construction and never changes afterwards, so a single
    instance can be shared freely between threads and pickled to worker
    processes.
    """

    __slots__ = ("_N", "_byte_length")

    def __init__(self, N: IntegerLike) -> None:
        """Initialize the group parameters.

        Args:
            N (IntegerLike): The modulus, an integer greater than 1

        Raises:
            InvalidParameterError: If N is not an integer or N <= 1
        """
        if not MPC.is_integer(N):
            raise InvalidParameterError(f"Modulus must be an integer, got {type(N).__name__}")
        modulus = MPC.mpz(N)
        if modulus <= 1:
            raise InvalidParameterError(f"Modulus must be greater than 1, got {modulus}")
        self._N = modulus
        self._byte_length = (modulus.bit_length() + 7) // 8

    @classmethod
    def coerce(cls, modulus: Union["GroupParameters", IntegerLike]) -> "GroupParameters":
        """Accept either GroupParameters or a raw modulus."""
        if isinstance(modulus, GroupParameters):
            return modulus
        return cls(modulus)

    @classmethod
    def from_hex(cls, digits: str) -> "GroupParameters":
        try:
            return cls(MPC.from_hex(digits))
        except ValueError as e:
            raise InvalidParameterError(f"Invalid hex modulus: {e}") from e

    def get_N(self) -> MPZ:
        return self._N

    def get_byte_length(self) -> int:
        return self._byte_length

    def contains(self, value: object) -> bool:
        return MPC.is_integer(value) and 0 <= value < self._N

    def element(self, value: IntegerLike) -> MPZ:
        if not self.contains(value):
            raise InvalidParameterError(f"Group element out of range [0, N): {value!r}")
        return MPC.mpz(value)

    def reduce(self, value: IntegerLike) -> MPZ:
        return MPC.mod(MPC.mpz(value), self._N)

    def encode(self, element: IntegerLike) -> bytes:
        return MPC.to_bytes(self.element(element), self._byte_length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupParameters):
            return NotImplemented
        return self._N == other._N

    def __hash__(self) -> int:
        return hash(int(self._N))

    def __getstate__(self):
        return {"N": self._N}

    def __setstate__(self, state) -> None:
        self._N = state["N"]
        self._byte_length = (self._N.bit_length() + 7) // 8

    def __repr__(self):
        return f"<GroupParameters(bits={self._N.bit_length()})>"

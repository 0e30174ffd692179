import hashlib
from typing import Sequence

from ..group import GroupParameters, Modulus
from ..mpc import MPC
from ..mpc.types import MPZ, IntegerLike
from ..protocol_constants import CHALLENGE_BYTES, FIAT_SHAMIR_TAG


class TranscriptHasher:
    """Fiat-Shamir challenges for the halving protocol.

    The prover and the verifier must derive exactly the same challenge from
    the same round state, so the encoding is fixed: a domain tag, then N and
    every element as big-endian bytes at N's width, hashed with SHA-256. The
    first CHALLENGE_BYTES of the digest form the challenge.
    """

    @staticmethod
    def challenge(modulus: Modulus, elements: Sequence[IntegerLike]) -> MPZ:
        """Derive the challenge for an ordered tuple of group elements.

        Args:
            modulus (Modulus): The group modulus N
            elements (Sequence[IntegerLike]): Elements in [0, N), order matters

        Returns:
            MPZ: A non-negative challenge below 2^(8 * CHALLENGE_BYTES)

        Raises:
            InvalidParameterError: If an element is outside [0, N)
        """
        group = GroupParameters.coerce(modulus)
        hasher = hashlib.sha256()
        hasher.update(FIAT_SHAMIR_TAG)
        hasher.update(MPC.to_bytes(group.get_N(), group.get_byte_length()))
        for element in elements:
            hasher.update(group.encode(element))
        return MPC.from_bytes(hasher.digest()[:CHALLENGE_BYTES])

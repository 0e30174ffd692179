import hashlib

from ..errors import InvalidParameterError
from ..group import GroupParameters, Modulus
from ..mpc import MPC
from ..mpc.types import MPZ, IntegerLike
from ..protocol_constants import START_EXPANSION_BYTES, START_TAG, STATE_TAG
from ..vrf.abstract.IVrfPublicKey import IVrfPublicKey

DIGEST_BYTES = hashlib.sha256().digest_size


class SeedDerivation:
    """Binds the VDF to a seed and to the prover's VRF public key."""

    @staticmethod
    def derive_start(modulus: Modulus, pubkey: IVrfPublicKey, seed: IntegerLike) -> MPZ:
        """Hash a seed and a public key to a starting group element.

        SHA-256 is run in counter mode until width + START_EXPANSION_BYTES
        bytes are available, then reduced mod N. The elements 0 and 1 square
        to themselves, so they are skipped by retrying with the next attempt
        counter.

        Args:
            modulus (Modulus): The group modulus N
            pubkey (IVrfPublicKey): The prover's VRF public key
            seed (IntegerLike): Seed already reduced into [0, N)

        Returns:
            MPZ: The starting element g in [2, N)

        Raises:
            InvalidParameterError: If the seed is outside [0, N) or N < 3
        """
        group = GroupParameters.coerce(modulus)
        if group.get_N() < 3:
            raise InvalidParameterError("Modulus too small to derive a non-trivial start element")
        if not group.contains(seed):
            raise InvalidParameterError(f"Seed must be reduced into [0, N), got {seed!r}")

        prefix = START_TAG + pubkey.to_bytes() + group.encode(seed)
        wanted = group.get_byte_length() + START_EXPANSION_BYTES
        attempt = 0
        while True:
            stream = b"".join(
                hashlib.sha256(
                    prefix + attempt.to_bytes(4, "big") + block.to_bytes(4, "big")
                ).digest()
                for block in range(-(-wanted // DIGEST_BYTES))
            )
            g = group.reduce(MPC.from_bytes(stream[:wanted]))
            if g > 1:
                return g
            attempt += 1

    @staticmethod
    def difficulty_hash(modulus: Modulus, pubkey: IVrfPublicKey, candidate: IntegerLike) -> MPZ:
        """Hash a candidate output under a public key.

        Args:
            modulus (Modulus): The group modulus N
            pubkey (IVrfPublicKey): The prover's VRF public key
            candidate (IntegerLike): Candidate output element in [0, N)

        Returns:
            MPZ: The 256-bit digest as an integer, reduced mod N

        Raises:
            InvalidParameterError: If the candidate is outside [0, N)
        """
        group = GroupParameters.coerce(modulus)
        digest = hashlib.sha256(STATE_TAG + pubkey.to_bytes() + group.encode(candidate)).digest()
        return group.reduce(MPC.from_bytes(digest))

    @staticmethod
    def meets_target(hash_state: IntegerLike, target: IntegerLike) -> bool:
        """Check a difficulty hash against a target.

        Args:
            hash_state (IntegerLike): Output of difficulty_hash
            target (IntegerLike): Maximum accepted hash value

        Returns:
            bool: True if hash_state <= target
        """
        return hash_state <= target

from typing import Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .VrfPublicKey import VrfPublicKey


class VrfKeyPair:
    """Ed25519 key pair for the VRF collaborator.

    The VDF itself only ever sees the public half.
    """

    def __init__(self, secret_key: Ed25519PrivateKey) -> None:
        self._secret_key = secret_key
        raw = secret_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
        self._public_key = VrfPublicKey(raw)

    @staticmethod
    def keygen() -> Tuple["VrfKeyPair", VrfPublicKey]:
        """Generate a fresh key pair.

        Returns:
            Tuple[VrfKeyPair, VrfPublicKey]: The key pair and its public key
        """
        pair = VrfKeyPair(Ed25519PrivateKey.generate())
        return pair, pair.get_public_key()

    @staticmethod
    def from_seed(seed: bytes) -> "VrfKeyPair":
        """Derive a key pair deterministically from a 32-byte seed.

        Args:
            seed (bytes): Raw Ed25519 private key bytes

        Returns:
            VrfKeyPair: The derived key pair
        """
        return VrfKeyPair(Ed25519PrivateKey.from_private_bytes(seed))

    def get_public_key(self) -> VrfPublicKey:
        return self._public_key

    def get_secret_key(self) -> Ed25519PrivateKey:
        return self._secret_key

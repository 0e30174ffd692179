from abc import ABC, abstractmethod


class IVrfPublicKey(ABC):
    """Opaque public key capability of a verifiable random function.

    The VDF only binds its starting element and difficulty hash to the key's
    canonical encoding; it never inspects or mutates the key otherwise.
    """

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Get the canonical encoding of the public key.

        Returns:
            bytes: The encoded public key
        """

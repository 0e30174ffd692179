from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from ..errors import InvalidParameterError
from .abstract.IVrfPublicKey import IVrfPublicKey

ED25519_PUBLIC_KEY_BYTES = 32


class VrfPublicKey(IVrfPublicKey):
    """Ed25519 VRF public key held as its raw 32-byte encoding.

    Only the bytes are stored so the key pickles cleanly into worker
    processes.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        """Initialize the public key.

        Args:
            raw (bytes): Raw 32-byte Ed25519 public key

        Raises:
            InvalidParameterError: If the bytes are not a valid Ed25519 key
        """
        raw = bytes(raw)
        if len(raw) != ED25519_PUBLIC_KEY_BYTES:
            raise InvalidParameterError(
                f"VRF public key must be {ED25519_PUBLIC_KEY_BYTES} bytes, got {len(raw)}"
            )
        try:
            Ed25519PublicKey.from_public_bytes(raw)
        except ValueError as e:
            raise InvalidParameterError(f"Invalid VRF public key: {e}") from e
        self._raw = raw

    @classmethod
    def from_hex(cls, digits: str) -> "VrfPublicKey":
        try:
            raw = bytes.fromhex(digits)
        except ValueError as e:
            raise InvalidParameterError(f"Invalid hex public key: {e}") from e
        return cls(raw)

    def to_bytes(self) -> bytes:
        return self._raw

    def to_hex(self) -> str:
        return self._raw.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VrfPublicKey):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __getstate__(self):
        return {"raw": self._raw}

    def __setstate__(self, state) -> None:
        self._raw = state["raw"]

    def __repr__(self):
        return f"<VrfPublicKey({self._raw.hex()[:16]}...)>"

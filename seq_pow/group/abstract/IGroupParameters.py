from abc import ABC, abstractmethod
from ...mpc.types import MPZ, IntegerLike


class IGroupParameters(ABC):
    """Abstract base class defining the public parameters of a group of unknown order."""

    @abstractmethod
    def get_N(self) -> MPZ:
        """Get the modulus N.

        Returns:
            MPZ: The modulus N
        """

    @abstractmethod
    def get_byte_length(self) -> int:
        """Get the fixed width used to encode group elements.

        Returns:
            int: ceil(bit_length(N) / 8)
        """

    @abstractmethod
    def contains(self, value: object) -> bool:
        """Check that a value is a canonical residue in [0, N).

        Args:
            value (object): Candidate element

        Returns:
            bool: True if the value is an integer in range
        """

    @abstractmethod
    def element(self, value: IntegerLike) -> MPZ:
        """Validate and convert a value into a group element.

        Args:
            value (IntegerLike): Candidate element

        Returns:
            MPZ: The element as an mpz

        Raises:
            InvalidParameterError: If the value is not in [0, N)
        """

    @abstractmethod
    def reduce(self, value: IntegerLike) -> MPZ:
        """Reduce an arbitrary integer into [0, N).

        Args:
            value (IntegerLike): Value to reduce

        Returns:
            MPZ: value mod N
        """

    @abstractmethod
    def encode(self, element: IntegerLike) -> bytes:
        """Encode a group element as fixed-width big-endian bytes.

        Args:
            element (IntegerLike): Element in [0, N)

        Returns:
            bytes: get_byte_length() bytes

        Raises:
            InvalidParameterError: If the element is not in [0, N)
        """

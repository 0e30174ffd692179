from abc import ABC, abstractmethod
from ..types import MPZ, IntegerLike


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision computing operations."""

    @staticmethod
    @abstractmethod
    def mpz(value: IntegerLike) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            mpz: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def is_integer(value: object) -> bool:
        """Check whether a value is an integer MPC can work with.

        Booleans are rejected even though they subclass int.

        Args:
            value (object): Value to check

        Returns:
            bool: True for int and mpz values
        """

    @staticmethod
    @abstractmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        """Compute (base ** exp) % mod efficiently.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value
            mod (mpz): Modulus value

        Returns:
            mpz: Result of modular exponentiation
        """

    @staticmethod
    @abstractmethod
    def mulmod(a: MPZ, b: MPZ, mod: MPZ) -> MPZ:
        """Compute (a * b) % mod.

        Args:
            a (mpz): First factor
            b (mpz): Second factor
            mod (mpz): Modulus value

        Returns:
            mpz: Reduced product
        """

    @staticmethod
    @abstractmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        """Compute base ** exp.

        Args:
            base (mpz): Base value
            exp (mpz): Exponent value

        Returns:
            mpz: Result of exponentiation
        """

    @staticmethod
    @abstractmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        """Compute value % modulus.

        Args:
            value (mpz): Value to reduce
            modulus (mpz): Modulus to reduce by

        Returns:
            mpz: Result of modular reduction
        """

    @staticmethod
    @abstractmethod
    def to_bytes(value: MPZ, length: int) -> bytes:
        """Encode a non-negative integer as fixed-width big-endian bytes.

        Args:
            value (mpz): Value to encode
            length (int): Output width in bytes

        Returns:
            bytes: Big-endian encoding

        Raises:
            OverflowError: If the value does not fit in length bytes
        """

    @staticmethod
    @abstractmethod
    def from_bytes(data: bytes) -> MPZ:
        """Decode big-endian bytes into an mpz.

        Args:
            data (bytes): Big-endian encoding

        Returns:
            mpz: Decoded value
        """

    @staticmethod
    @abstractmethod
    def to_hex(value: MPZ) -> str:
        """Encode an integer as a lowercase hex string without the 0x prefix.

        Args:
            value (mpz): Value to encode

        Returns:
            str: Hex digits
        """

    @staticmethod
    @abstractmethod
    def from_hex(digits: str) -> MPZ:
        """Decode a hex string, with or without the 0x prefix.

        Args:
            digits (str): Hex digits

        Returns:
            mpz: Decoded value

        Raises:
            ValueError: If the string is not valid hex
        """

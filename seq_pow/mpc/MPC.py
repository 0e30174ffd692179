import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, IntegerLike


class MPC(IMPC):
    """Implementation of multi-precision computing operations."""

    @staticmethod
    def mpz(value: IntegerLike) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def is_integer(value: object) -> bool:
        if isinstance(value, bool):
            return False
        return isinstance(value, (int, gmpy2.mpz))

    @staticmethod
    def powmod(base: MPZ, exp: MPZ, mod: MPZ) -> MPZ:
        return gmpy2.powmod(base, exp, mod)

    @staticmethod
    def mulmod(a: MPZ, b: MPZ, mod: MPZ) -> MPZ:
        return (a * b) % mod

    @staticmethod
    def pow(base: MPZ, exp: MPZ) -> MPZ:
        return base**exp

    @staticmethod
    def mod(value: MPZ, modulus: MPZ) -> MPZ:
        return value % modulus  # gmpy2 supports % operator for mpz values

    @staticmethod
    def to_bytes(value: MPZ, length: int) -> bytes:
        return int(value).to_bytes(length, byteorder="big")

    @staticmethod
    def from_bytes(data: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(data, byteorder="big"))

    @staticmethod
    def to_hex(value: MPZ) -> str:
        return gmpy2.mpz(value).digits(16)

    @staticmethod
    def from_hex(digits: str) -> MPZ:
        digits = digits.strip().lower()
        if digits.startswith("0x"):
            digits = digits[2:]
        return gmpy2.mpz(digits, 16)

"""Type definitions for multi-precision computing operations."""

from typing import TypeVar, NewType, Union
from gmpy2 import mpz as _mpz

# Define base types from gmpy2
MPZ = NewType("MPZ", _mpz)

# Anything MPC.mpz accepts
IntegerLike = Union[MPZ, int]

# Generic type variable for numeric operations
T = TypeVar("T", MPZ, int)

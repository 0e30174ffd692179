"""Public group parameters module."""

from typing import Union

from .GroupParameters import GroupParameters
from .abstract.IGroupParameters import IGroupParameters
from ..mpc.types import IntegerLike

# Every operation accepts the wrapper or a raw modulus
Modulus = Union[GroupParameters, IntegerLike]

__all__ = ["GroupParameters", "IGroupParameters", "Modulus"]

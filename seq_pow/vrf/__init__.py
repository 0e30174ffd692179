"""VRF public key capability module."""

from .VrfPublicKey import VrfPublicKey
from .VrfKeyPair import VrfKeyPair
from .abstract.IVrfPublicKey import IVrfPublicKey

__all__ = ["VrfPublicKey", "VrfKeyPair", "IVrfPublicKey"]

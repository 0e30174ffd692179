import pytest
from gmpy2 import mpz

from seq_pow.group import GroupParameters
from seq_pow.protocol_constants import RSA_2048_MODULUS
from seq_pow.vrf import VrfKeyPair
from seq_pow.vrf.abstract.IVrfPublicKey import IVrfPublicKey


class StubPublicKey(IVrfPublicKey):
    """Public key stand-in with a fixed encoding."""

    def __init__(self, raw: bytes = b"stub-vrf-public-key"):
        self._raw = raw

    def to_bytes(self) -> bytes:
        return self._raw


@pytest.fixture(scope="session")
def rsa_group():
    """Fixture for the RSA-2048 group."""
    return GroupParameters(RSA_2048_MODULUS)


@pytest.fixture
def small_group():
    """Fixture for a toy group, N = 61 * 53."""
    return GroupParameters(3233)


@pytest.fixture
def stub_pubkey():
    return StubPublicKey()


@pytest.fixture(scope="session")
def vrf_pubkey():
    """Fixture for a deterministic Ed25519 VRF public key."""
    return VrfKeyPair.from_seed(bytes(range(32))).get_public_key()


@pytest.fixture
def easy_target(rsa_group):
    """A target every difficulty hash meets (hashes are reduced below N)."""
    return rsa_group.get_N()


@pytest.fixture
def start_element(rsa_group, vrf_pubkey):
    """Fixture for a start element derived the way the solver derives it."""
    from seq_pow.seed import SeedDerivation

    return SeedDerivation.derive_start(rsa_group, vrf_pubkey, mpz(0x1EEB30C7))

import pickle

import pytest

from seq_pow.errors import InvalidParameterError
from seq_pow.vrf import IVrfPublicKey, VrfKeyPair, VrfPublicKey


def test_keygen_returns_raw_ed25519_public_key():
    """Test that keygen yields a 32-byte public key matching the pair."""
    pair, pubkey = VrfKeyPair.keygen()
    assert isinstance(pubkey, IVrfPublicKey)
    assert len(pubkey.to_bytes()) == 32
    assert pair.get_public_key() == pubkey


def test_keygen_is_random():
    _, first = VrfKeyPair.keygen()
    _, second = VrfKeyPair.keygen()
    assert first != second


def test_from_seed_is_deterministic():
    seed = bytes(range(32))
    assert VrfKeyPair.from_seed(seed).get_public_key() == VrfKeyPair.from_seed(seed).get_public_key()


def test_rejects_wrong_length():
    with pytest.raises(InvalidParameterError):
        VrfPublicKey(b"\x00" * 31)


def test_hex_round_trip(vrf_pubkey):
    assert VrfPublicKey.from_hex(vrf_pubkey.to_hex()) == vrf_pubkey


def test_from_hex_rejects_garbage():
    with pytest.raises(InvalidParameterError):
        VrfPublicKey.from_hex("xyz")


def test_pickle_round_trip(vrf_pubkey):
    restored = pickle.loads(pickle.dumps(vrf_pubkey))
    assert restored == vrf_pubkey
    assert hash(restored) == hash(vrf_pubkey)

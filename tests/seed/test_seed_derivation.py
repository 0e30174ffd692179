import pytest
from gmpy2 import mpz

from seq_pow.errors import InvalidParameterError
from seq_pow.protocol_constants import PREV_BLOCK_HASH, TARGET_HASH
from seq_pow.seed import SeedDerivation
from seq_pow.vrf import VrfKeyPair

from conftest import StubPublicKey


def test_derive_start_is_deterministic(rsa_group, vrf_pubkey):
    seed = mpz(PREV_BLOCK_HASH, 16)
    assert SeedDerivation.derive_start(rsa_group, vrf_pubkey, seed) == SeedDerivation.derive_start(
        rsa_group, vrf_pubkey, seed
    )


def test_derive_start_is_a_non_trivial_element(rsa_group, vrf_pubkey):
    """Test that the start element is never 0 or 1, which square to themselves."""
    for seed in range(16):
        g = SeedDerivation.derive_start(rsa_group, vrf_pubkey, seed)
        assert 2 <= g < rsa_group.get_N()


def test_derive_start_in_tiny_group():
    """Test that retries skip 0 and 1 even when most outputs would land there."""
    for seed in range(3):
        assert SeedDerivation.derive_start(3, StubPublicKey(), seed) == 2


def test_derive_start_binds_public_key(rsa_group, vrf_pubkey):
    _, other = VrfKeyPair.keygen()
    seed = mpz(PREV_BLOCK_HASH, 16)
    assert SeedDerivation.derive_start(rsa_group, vrf_pubkey, seed) != SeedDerivation.derive_start(
        rsa_group, other, seed
    )


def test_derive_start_binds_seed(rsa_group, stub_pubkey):
    assert SeedDerivation.derive_start(rsa_group, stub_pubkey, 1) != SeedDerivation.derive_start(
        rsa_group, stub_pubkey, 2
    )


def test_derive_start_accepts_any_public_key_capability(rsa_group):
    g = SeedDerivation.derive_start(rsa_group, StubPublicKey(b"opaque"), 7)
    assert rsa_group.contains(g)


def test_derive_start_rejects_unreduced_seed(small_group, stub_pubkey):
    with pytest.raises(InvalidParameterError):
        SeedDerivation.derive_start(small_group, stub_pubkey, 3233)
    with pytest.raises(InvalidParameterError):
        SeedDerivation.derive_start(small_group, stub_pubkey, -1)


def test_derive_start_rejects_tiny_modulus(stub_pubkey):
    with pytest.raises(InvalidParameterError):
        SeedDerivation.derive_start(2, stub_pubkey, 1)


def test_difficulty_hash_is_deterministic_and_reduced(rsa_group, vrf_pubkey):
    first = SeedDerivation.difficulty_hash(rsa_group, vrf_pubkey, 12345)
    assert first == SeedDerivation.difficulty_hash(rsa_group, vrf_pubkey, 12345)
    assert 0 <= first < rsa_group.get_N()
    assert first < 2 ** 256


def test_difficulty_hash_in_small_group_is_reduced(small_group, stub_pubkey):
    for candidate in (0, 1, 2, 3232):
        assert 0 <= SeedDerivation.difficulty_hash(small_group, stub_pubkey, candidate) < 3233


def test_difficulty_hash_binds_public_key(rsa_group, stub_pubkey, vrf_pubkey):
    assert SeedDerivation.difficulty_hash(rsa_group, stub_pubkey, 99) != SeedDerivation.difficulty_hash(
        rsa_group, vrf_pubkey, 99
    )


def test_difficulty_hash_rejects_out_of_range_candidate(small_group, stub_pubkey):
    with pytest.raises(InvalidParameterError):
        SeedDerivation.difficulty_hash(small_group, stub_pubkey, 3233)


def test_meets_target_boundaries():
    """Test that a hash equal to the target passes and anything above fails."""
    target = mpz(TARGET_HASH, 16)
    assert SeedDerivation.meets_target(target, target)
    assert SeedDerivation.meets_target(target - 1, target)
    assert not SeedDerivation.meets_target(target + 1, target)
    assert SeedDerivation.meets_target(0, 0)

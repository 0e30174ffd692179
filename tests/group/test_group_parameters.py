import pickle

import pytest
from gmpy2 import mpz

from seq_pow.errors import InvalidParameterError
from seq_pow.group import GroupParameters


@pytest.mark.parametrize("modulus", [0, 1, -1, -3233])
def test_rejects_non_positive_or_unit_modulus(modulus):
    """Test that a modulus <= 1 is a configuration error."""
    with pytest.raises(InvalidParameterError):
        GroupParameters(modulus)


@pytest.mark.parametrize("modulus", ["3233", 3233.0, None, True])
def test_rejects_non_integer_modulus(modulus):
    with pytest.raises(InvalidParameterError):
        GroupParameters(modulus)


def test_invalid_parameter_error_is_a_value_error():
    with pytest.raises(ValueError):
        GroupParameters(0)


def test_accessors(small_group):
    assert small_group.get_N() == 3233
    assert isinstance(small_group.get_N(), type(mpz(0)))
    assert small_group.get_byte_length() == 2  # 3233 needs 12 bits


def test_contains(small_group):
    """Test that only canonical residues are group elements."""
    assert small_group.contains(0)
    assert small_group.contains(mpz(3232))
    assert not small_group.contains(3233)
    assert not small_group.contains(-1)
    assert not small_group.contains("5")


def test_element_raises_out_of_range(small_group):
    assert small_group.element(5) == 5
    with pytest.raises(InvalidParameterError):
        small_group.element(3233)


def test_reduce(small_group):
    assert small_group.reduce(3233 + 7) == 7
    assert small_group.reduce(-1) == 3232


def test_encode_is_fixed_width(rsa_group):
    encoded = rsa_group.encode(5)
    assert len(encoded) == 256
    assert encoded[-1] == 5
    assert encoded[:-1] == bytes(255)


def test_coerce_accepts_raw_modulus_and_wrapper(small_group):
    assert GroupParameters.coerce(small_group) is small_group
    assert GroupParameters.coerce(3233) == small_group


def test_from_hex():
    assert GroupParameters.from_hex("0xca1").get_N() == 3233
    with pytest.raises(InvalidParameterError):
        GroupParameters.from_hex("zz")


def test_pickle_round_trip(rsa_group):
    """Test that parameters survive the trip to a worker process."""
    restored = pickle.loads(pickle.dumps(rsa_group))
    assert restored == rsa_group
    assert restored.get_byte_length() == rsa_group.get_byte_length()

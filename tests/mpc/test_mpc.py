import pytest
from gmpy2 import mpz

from seq_pow.mpc import MPC


def test_powmod_matches_builtin_pow():
    """Test that powmod agrees with Python's three-argument pow."""
    assert MPC.powmod(mpz(5), mpz(117), mpz(3233)) == pow(5, 117, 3233)


def test_mulmod_reduces_product():
    assert MPC.mulmod(mpz(3000), mpz(3000), mpz(3233)) == (3000 * 3000) % 3233


def test_pow_and_mod():
    assert MPC.pow(mpz(2), 10) == 1024
    assert MPC.mod(mpz(1024), mpz(1000)) == 24


def test_is_integer():
    """Test that ints and mpz are accepted while bools, floats and strings are not."""
    assert MPC.is_integer(5)
    assert MPC.is_integer(mpz(5))
    assert not MPC.is_integer(True)
    assert not MPC.is_integer(5.0)
    assert not MPC.is_integer("5")


def test_bytes_are_fixed_width_big_endian():
    assert MPC.to_bytes(mpz(0x0102), 4) == b"\x00\x00\x01\x02"
    assert MPC.from_bytes(b"\x00\x00\x01\x02") == 0x0102


def test_to_bytes_rejects_values_that_do_not_fit():
    with pytest.raises(OverflowError):
        MPC.to_bytes(mpz(0x010203), 2)


def test_hex_conversion():
    """Test hex encoding without prefix and decoding with or without it."""
    assert MPC.to_hex(mpz(255)) == "ff"
    assert MPC.from_hex("ff") == 255
    assert MPC.from_hex("0xFF") == 255
    assert MPC.from_hex(" 0x1eeb30c7 ") == 0x1EEB30C7


def test_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        MPC.from_hex("not hex")

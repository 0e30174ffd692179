from hypothesis import given, settings, strategies as st

from seq_pow.group import GroupParameters
from seq_pow.protocol_constants import RSA_2048_MODULUS
from seq_pow.vdf import Evaluator, HalvingProtocol, ProofGenerator, ProofVerifier

from conftest import StubPublicKey

GROUP = GroupParameters(RSA_2048_MODULUS)
PUBKEY = StubPublicKey()


@settings(max_examples=40, deadline=None)
@given(
    g=st.integers(min_value=0, max_value=int(RSA_2048_MODULUS) - 1),
    t=st.integers(min_value=0, max_value=400),
)
def test_honest_proofs_always_verify(g, t):
    """Any start element and step count yields an accepted proof of the right length."""
    y = Evaluator.evaluate(GROUP, g, t, PUBKEY, GROUP.get_N()).y
    proof = ProofGenerator.generate_proof(GROUP, g, y, t)
    assert len(proof) == HalvingProtocol.round_count(t)
    assert ProofVerifier.verify_proof(GROUP, g, y, t, proof, PUBKEY, GROUP.get_N())


@settings(max_examples=25, deadline=None)
@given(t=st.integers(min_value=0, max_value=10_000))
def test_schedule_ends_at_two(t):
    rounds = HalvingProtocol.schedule(t)
    if t > 1:
        assert rounds[-1] == 2
        assert all(a // 2 <= b <= a // 2 + 1 for a, b in zip(rounds, rounds[1:]))
    else:
        assert rounds == []

"""Hand replay of a five-step proof in the toy group N = 3233.

An odd initial T is compensated like every odd half (T + 1 steps, y squared
once), so T = 5 runs 5 -> 6 -> 3 -> 4 -> 2 -> 1 with three midpoints rather
than 5 -> 2 -> 1. Splitting an odd T directly would fold halves of unequal
length and honest proofs would fail.
"""

from seq_pow.transcript import TranscriptHasher
from seq_pow.vdf import Evaluator, HalvingProtocol, ProofGenerator, ProofVerifier

N = 3233
G = 5
T = 5


def _replay():
    """Recompute the transcript with builtin pow, checking the claim after every fold."""
    x = G
    y = pow(G, 2 ** T, N)
    t = T
    # odd T: claim one extra squaring
    t, y = t + 1, y * y % N
    midpoints = []
    while t > 1:
        assert y == pow(x, 2 ** t, N)
        half = t // 2
        mu = pow(x, 2 ** half, N)
        midpoints.append(mu)
        r = int(TranscriptHasher.challenge(N, [x, y, mu]))
        x, y = pow(x, r, N) * mu % N, pow(mu, r, N) * y % N
        t = half
        if t % 2 == 1 and t != 1:
            t, y = t + 1, y * y % N
    assert t == 1
    assert y == x * x % N
    return midpoints


def test_schedule():
    """Test the round lengths 5 -> 6 -> 3 -> 4 -> 2 -> 1."""
    assert HalvingProtocol.schedule(T) == [6, 4, 2]


def test_output(stub_pubkey):
    assert Evaluator.evaluate(N, G, T, stub_pubkey, N).y == pow(G, 32, N)


def test_proof_matches_hand_replay():
    y = pow(G, 2 ** T, N)
    proof = ProofGenerator.generate_proof(N, G, y, T)
    assert proof == _replay()
    assert len(proof) == 3


def test_verifier_accepts(stub_pubkey):
    y = pow(G, 2 ** T, N)
    proof = ProofGenerator.generate_proof(N, G, y, T)
    assert ProofVerifier.verify_transcript(N, G, y, T, proof)
    assert ProofVerifier.verify_proof(N, G, y, T, proof, stub_pubkey, N)

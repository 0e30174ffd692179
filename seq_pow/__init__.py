"""Sequential squaring verifiable delay function with Pietrzak halving proofs."""

from .errors import SeqPowError, InvalidParameterError, EvaluationCancelled
from .group import GroupParameters
from .seed import SeedDerivation
from .transcript import TranscriptHasher
from .vdf import (
    CancellationToken,
    EvaluationResult,
    Evaluator,
    HalvingProtocol,
    ProofGenerator,
    ProofVerifier,
    VdfSolution,
    VerificationResult,
)
from .vrf import IVrfPublicKey, VrfKeyPair, VrfPublicKey

__version__ = "0.1.0"

derive_start = SeedDerivation.derive_start
difficulty_hash = SeedDerivation.difficulty_hash
meets_target = SeedDerivation.meets_target
challenge = TranscriptHasher.challenge
evaluate = Evaluator.evaluate
generate_proof = ProofGenerator.generate_proof
verify_proof = ProofVerifier.verify_proof

__all__ = [
    "SeqPowError",
    "InvalidParameterError",
    "EvaluationCancelled",
    "GroupParameters",
    "SeedDerivation",
    "TranscriptHasher",
    "CancellationToken",
    "EvaluationResult",
    "Evaluator",
    "HalvingProtocol",
    "ProofGenerator",
    "ProofVerifier",
    "VdfSolution",
    "VerificationResult",
    "IVrfPublicKey",
    "VrfKeyPair",
    "VrfPublicKey",
    "derive_start",
    "difficulty_hash",
    "meets_target",
    "challenge",
    "evaluate",
    "generate_proof",
    "verify_proof",
]

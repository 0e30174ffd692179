"""Verifiable delay function module."""

from .Evaluator import Evaluator
from .ProofGenerator import ProofGenerator
from .ProofVerifier import ProofVerifier
from .HalvingProtocol import HalvingProtocol
from .CancellationToken import CancellationToken
from .VdfSolution import VdfSolution
from .results import EvaluationResult, VerificationResult
from .abstract.IEvaluator import IEvaluator
from .abstract.IProofGenerator import IProofGenerator
from .abstract.IProofVerifier import IProofVerifier

__all__ = [
    "Evaluator",
    "ProofGenerator",
    "ProofVerifier",
    "HalvingProtocol",
    "CancellationToken",
    "VdfSolution",
    "EvaluationResult",
    "VerificationResult",
    "IEvaluator",
    "IProofGenerator",
    "IProofVerifier",
]

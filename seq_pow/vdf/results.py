"""Result types returned by the evaluator and the verifier."""

from typing import NamedTuple

from ..mpc.types import MPZ


class EvaluationResult(NamedTuple):
    """Output of the squaring chain and its difficulty verdict."""

    y: MPZ
    meets_difficulty: bool


class VerificationResult(NamedTuple):
    """The two independent acceptance gates of a proof.

    A proof is accepted only when the transcript replays correctly and the
    claimed output meets the difficulty target.
    """

    proof_valid: bool
    meets_difficulty: bool

    @property
    def accepted(self) -> bool:
        return self.proof_valid and self.meets_difficulty

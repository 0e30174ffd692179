"""Exceptions raised by the sequential squaring VDF."""


class SeqPowError(Exception):
    """Base class for all seq_pow errors."""


class InvalidParameterError(SeqPowError, ValueError):
    """A precondition on the public parameters or inputs was violated.

    Raised for configuration faults such as a modulus <= 1, a negative step
    count, or a group element outside [0, N) handed to the prover. A proof
    that simply fails to verify is never reported through this exception.
    """


class EvaluationCancelled(SeqPowError):
    """A long running evaluation or proof generation was cancelled.

    Attributes:
        completed_steps: Number of squarings (or proof rounds) finished
            before the cancellation was observed.
    """

    def __init__(self, message: str, completed_steps: int = 0):
        super().__init__(message)
        self.completed_steps = completed_steps

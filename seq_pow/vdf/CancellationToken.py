import threading
import time
from typing import Optional

from ..errors import EvaluationCancelled


class CancellationToken:
    """Cooperative cancellation for long squaring chains.

    The evaluator checks the token once per squaring and the proof generator
    once per round. A token may be cancelled from another thread, or expire
    on its own after a timeout measured from construction.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        """Initialize the token.

        Args:
            timeout (Optional[float]): Seconds until the token expires, or None
        """
        self._event = threading.Event()
        self._deadline = None if timeout is None else time.monotonic() + timeout

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._event.set()
            return True
        return False

    def raise_if_cancelled(self, completed_steps: int = 0) -> None:
        """Raise EvaluationCancelled if the token was cancelled or expired.

        Args:
            completed_steps (int): Progress reported on the exception
        """
        if self.is_cancelled():
            raise EvaluationCancelled(
                f"Cancelled after {completed_steps} steps", completed_steps=completed_steps
            )

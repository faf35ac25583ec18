"""Per-call context carrying cancellation and an optional deadline.

``CallContext`` is what ``Engine.infer`` receives as its first argument. The
engine checks it before issuing the backend call, turns the remaining time
into the HTTP client's per-request timeout, and checks cancellation again
once the call returns.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

from .cancellation_token import CancellationToken
from .cancelled_error import CancelledError


@dataclass(frozen=True)
class CallContext:
    """Cancellation token plus an absolute ``time.monotonic()`` deadline.

    Attributes:
        token: Cooperative cancellation token shared with the caller.
        deadline: Monotonic timestamp after which the call is abandoned, or
            ``None`` for no deadline.
    """

    token: CancellationToken = field(default_factory=CancellationToken)
    deadline: Optional[float] = None

    @classmethod
    def background(cls) -> "CallContext":
        """Return a context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, *, token: CancellationToken | None = None) -> "CallContext":
        """Return a context whose deadline is ``seconds`` from now."""
        return cls(token=token or CancellationToken(), deadline=time.monotonic() + seconds)

    def child(self, timeout: float | None = None) -> "CallContext":
        """Derive a context whose token cascades from this one.

        The derived deadline is the earlier of this deadline and ``timeout``
        seconds from now.
        """
        deadline = self.deadline
        if timeout is not None:
            candidate = time.monotonic() + timeout
            deadline = candidate if deadline is None else min(deadline, candidate)
        return CallContext(token=self.token.child(), deadline=deadline)

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline (never negative), or ``None``."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def done(self) -> bool:
        return self.token.cancelled or (self.deadline is not None and time.monotonic() >= self.deadline)

    def raise_if_done(self) -> None:
        """Raise ``CancelledError`` when cancelled or past the deadline."""
        self.token.raise_if_cancelled()
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise CancelledError("deadline exceeded", deadline_exceeded=True)


__all__ = ["CallContext"]

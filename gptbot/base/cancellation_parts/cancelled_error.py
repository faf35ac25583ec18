"""Cancellation error type.

Defines the public ``CancelledError`` raised when an ``infer`` call observes a
cancelled token or an expired deadline on its call context.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an inference call is cancelled or its deadline has passed.

    Kept distinct from ``TransportError`` so callers can tell "I gave up"
    apart from "the backend failed".
    """

    def __init__(self, reason: str = "operation cancelled", *, deadline_exceeded: bool = False) -> None:
        super().__init__(reason)
        self.reason = reason
        self.deadline_exceeded = deadline_exceeded


__all__ = ["CancelledError"]

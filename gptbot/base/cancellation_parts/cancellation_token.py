"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used by call contexts so that a caller
on another thread can abandon a pending ``infer`` call. Besides polling
(``cancelled`` / ``raise_if_cancelled``), waiters can register an
``on_cancel`` callback to be woken the moment cancellation is requested.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError

CancelCallback = Callable[[Optional[str]], None]


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe: ``cancel`` may be called from any thread. Child tokens inherit
    cancellation when the parent is cancelled, and registered callbacks run
    exactly once, on the cancelling thread, outside the token's lock.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        self._callbacks: List[CancelCallback] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation, fire callbacks, and cascade to children."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            self._reason = reason
            children = list(self._children)
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback(reason)
        for child in children:
            child.cancel(reason)

    def on_cancel(self, callback: CancelCallback) -> Callable[[], None]:
        """Register ``callback(reason)`` to run when the token is cancelled.

        If the token is already cancelled the callback runs immediately on the
        calling thread. Returns a function that unregisters the callback; it is
        safe to call more than once and after cancellation.
        """
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return lambda: self._remove_callback(callback)
            reason = self._reason
        callback(reason)
        return lambda: None

    def _remove_callback(self, callback: CancelCallback) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._cancelled
            reason = self._reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._cancelled:
            raise CancelledError(self._reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._cancelled}, "
            f"reason={self._reason!r}, children={len(self._children)}, "
            f"callbacks={len(self._callbacks)})"
        )


__all__ = ["CancellationToken", "CancelCallback"]

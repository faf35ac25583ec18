"""Run a blocking call so that a cancellation token can abandon it.

Synchronous HTTP clients block the calling thread until the exchange finishes
or times out, and offer no way to interrupt them from outside. ``run_cancellable``
moves the call onto a daemon worker thread and has the caller wait on an
event that is set either by the worker finishing or by the token being
cancelled. On cancellation the caller gets ``CancelledError`` right away; the
abandoned worker runs to completion (bounded by the client's own timeout) and
its result is discarded.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, TypeVar

from .cancellation_token import CancellationToken
from .cancelled_error import CancelledError

T = TypeVar("T")


def run_cancellable(call: Callable[[], T], token: CancellationToken, *, name: str = "gptbot-call") -> T:
    """Run ``call`` on a worker thread and return its result.

    Parameters:
        call: Zero-argument callable performing the blocking work.
        token: Token whose cancellation abandons the wait.
        name: Worker thread name, visible in thread dumps.

    Raises:
        CancelledError: ``token`` was cancelled before or while ``call`` ran.
        Exception: Whatever ``call`` raised, re-raised unchanged in the caller.
    """
    token.raise_if_cancelled()
    done = threading.Event()
    outcome: Dict[str, Any] = {}

    def _target() -> None:
        try:
            outcome["value"] = call()
        except BaseException as exc:  # noqa: BLE001 - re-raised in the calling thread
            outcome["error"] = exc
        finally:
            done.set()

    unregister = token.on_cancel(lambda _reason: done.set())
    try:
        threading.Thread(target=_target, name=name, daemon=True).start()
        done.wait()
    finally:
        unregister()

    if token.cancelled:
        raise CancelledError(token.reason or "operation cancelled")
    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]


__all__ = ["run_cancellable"]

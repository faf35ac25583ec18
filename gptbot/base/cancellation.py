"""Cancellation and deadline primitives (public API facade).

Purpose
-------
Expose the call-context constructs via the canonical
``gptbot.base.cancellation`` import path while the concrete implementations
live under ``cancellation_parts``.

Notes
-----
- ``CallContext`` is the first argument of ``Engine.infer``.
- ``CancellationToken`` enables cancellation signalling from another thread.
- ``run_cancellable`` lets a token abandon a blocking call in progress.
- ``CancelledError`` is raised by calls that observe cancellation or an
  expired deadline.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.call_context import CallContext
from .cancellation_parts.cancellable_call import run_cancellable

__all__ = ["CallContext", "CancellationToken", "CancelledError", "run_cancellable"]

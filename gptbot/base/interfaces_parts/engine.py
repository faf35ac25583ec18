"""Engine Protocol (single-class module).

Defines the inference contract every backend adapter satisfies.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CallContext
from ..models import EngineRequest, EngineResponse


@runtime_checkable
class Engine(Protocol):
    """Minimal interface for inference engines.

    Implementations map ``EngineRequest`` fields to their backend's native
    parameters, normalize the reply to ``EngineResponse``, and never leak
    client objects upstream. Callers should depend on this Protocol, never on
    a concrete engine class.
    """

    def infer(self, ctx: Optional[CallContext], request: EngineRequest) -> EngineResponse:
        """Execute exactly one backend call for ``request``.

        Failure handling: raise ``TransportError`` when the HTTP client fails,
        ``EmptyResponseError`` when the backend returns no choices, and
        ``CancelledError`` when ``ctx`` is cancelled or past its deadline.
        Nothing is retried or cached.
        """
        ...

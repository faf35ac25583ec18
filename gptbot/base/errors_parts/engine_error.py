"""
Structured engine error exception types.

``EngineError`` carries a normalized `ErrorCode` plus the engine and model the
failure belongs to. Subclasses name the three ways an ``infer`` call can fail
on its own terms: the transport failed, the backend answered with nothing, or
the request could not be sent at all.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class EngineError(Exception):
    """Represents a structured engine error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        engine: Engine key where the error originated (e.g., ``"openai.chat"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    engine: str
    model: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining engine, model, code, and message."""
        return f"{self.engine}:{self.model or '-'} {self.code.value}: {self.message}"


class TransportError(EngineError):
    """The HTTP client failed: network, non-2xx status, auth, rate limit, or bad payload.

    The client exception is kept unmodified in ``raw`` and chained as
    ``__cause__``. Engines never retry it.
    """


class EmptyResponseError(EngineError):
    """The backend call succeeded but returned zero choices."""


class RequestValidationError(EngineError):
    """The request cannot be translated, e.g. it carries no messages."""


__all__ = ["EngineError", "TransportError", "EmptyResponseError", "RequestValidationError"]

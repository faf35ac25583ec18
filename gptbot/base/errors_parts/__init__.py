"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `gptbot.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .engine_error import EmptyResponseError, EngineError, RequestValidationError, TransportError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "EngineError",
    "TransportError",
    "EmptyResponseError",
    "RequestValidationError",
    "classify_exception",
]

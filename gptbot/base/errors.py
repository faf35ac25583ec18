"""Unified engine error taxonomy public surface.

This module re-exports the implementations under ``gptbot.base.errors_parts``
to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.engine_error import EmptyResponseError, EngineError, RequestValidationError, TransportError
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "EngineError",
    "TransportError",
    "EmptyResponseError",
    "RequestValidationError",
    "classify_exception",
]

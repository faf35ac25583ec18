"""
Engines Base Package

Exports backend-agnostic contracts, DTOs, the error taxonomy, call-context
primitives, and the engine factory:
- Interfaces: the ``Engine`` inference contract
- Models (DTOs): immutable request/response value objects
- Errors: ``EngineError`` and its transport/empty/validation variants
- Factory: model-family dispatch to the concrete engines
"""

from .cancellation import CallContext, CancellationToken, CancelledError
from .dto import EngineParams
from .errors import (
    EmptyResponseError,
    EngineError,
    ErrorCode,
    RequestValidationError,
    TransportError,
    classify_exception,
)
from .factory import EngineFactory, UnknownModelError, create_engine, engine_from_config
from .interfaces import Engine, HasModel
from .models import (
    EngineMessage,
    EngineRequest,
    EngineResponse,
    InferenceMetadata,
    ModelFamily,
    ModelType,
)

__all__ = [
    "CallContext",
    "CancellationToken",
    "CancelledError",
    "EngineParams",
    "EmptyResponseError",
    "EngineError",
    "ErrorCode",
    "RequestValidationError",
    "TransportError",
    "classify_exception",
    "EngineFactory",
    "UnknownModelError",
    "create_engine",
    "engine_from_config",
    "Engine",
    "HasModel",
    "EngineMessage",
    "EngineRequest",
    "EngineResponse",
    "InferenceMetadata",
    "ModelFamily",
    "ModelType",
]

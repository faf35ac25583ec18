"""gptbot package

Uniform inference engines over OpenAI's two text-generation protocols.

Purpose:
    Callers build an ``EngineRequest``, hand it to whichever ``Engine`` they
    hold, and get an ``EngineResponse`` back, without knowing whether the model
    speaks the chat protocol (``/v1/chat/completions``) or the prompt
    completion protocol (``/v1/completions``).

Public API (re-exported):
    - Version: ``__version__``
    - Contract: :class:`Engine`
    - Models: :class:`EngineMessage`, :class:`EngineRequest`,
      :class:`EngineResponse`, :class:`ModelType`, :class:`ModelFamily`
    - Engines: :class:`OpenAIChatEngine`, :class:`OpenAICompletionEngine`
    - Constructors: :func:`new_openai_chat_engine`,
      :func:`new_openai_completion_engine`, :func:`create_engine`,
      :func:`engine_from_config`
    - Context: :class:`CallContext`, :class:`CancellationToken`
    - Errors: :class:`EngineError`, :class:`TransportError`,
      :class:`EmptyResponseError`, :class:`RequestValidationError`,
      :class:`CancelledError`, :class:`UnknownModelError`, :class:`ErrorCode`
"""

from .base.cancellation import CallContext, CancellationToken, CancelledError
from .base.dto import EngineParams
from .base.errors import (
    EmptyResponseError,
    EngineError,
    ErrorCode,
    RequestValidationError,
    TransportError,
)
from .base.factory import EngineFactory, UnknownModelError, create_engine, engine_from_config
from .base.interfaces import Engine
from .base.models import (
    EngineMessage,
    EngineRequest,
    EngineResponse,
    InferenceMetadata,
    ModelFamily,
    ModelType,
)
from .base.utils.simple import simple
from .openai import (
    OpenAIChatEngine,
    OpenAICompletionEngine,
    new_openai_chat_engine,
    new_openai_completion_engine,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Engine",
    "EngineMessage",
    "EngineRequest",
    "EngineResponse",
    "InferenceMetadata",
    "ModelFamily",
    "ModelType",
    "OpenAIChatEngine",
    "OpenAICompletionEngine",
    "new_openai_chat_engine",
    "new_openai_completion_engine",
    "create_engine",
    "engine_from_config",
    "EngineFactory",
    "EngineParams",
    "CallContext",
    "CancellationToken",
    "CancelledError",
    "EngineError",
    "TransportError",
    "EmptyResponseError",
    "RequestValidationError",
    "UnknownModelError",
    "ErrorCode",
    "simple",
]

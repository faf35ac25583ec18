"""
Backend-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``gptbot.base.models_parts`` so callers have a single stable import path.
"""

from .models_parts.engine_message import EngineMessage
from .models_parts.engine_request import EngineRequest, messages_from_pairs
from .models_parts.engine_response import EngineResponse
from .models_parts.inference_metadata import InferenceMetadata
from .models_parts.model_type import ModelFamily, ModelType

__all__ = [
    "EngineMessage",
    "EngineRequest",
    "EngineResponse",
    "InferenceMetadata",
    "ModelFamily",
    "ModelType",
    "messages_from_pairs",
]

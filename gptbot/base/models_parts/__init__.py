"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`gptbot.base.models_parts` if needed, while `gptbot.base.models` remains
the primary stable import path.
"""

from .engine_message import EngineMessage
from .engine_request import EngineRequest, messages_from_pairs
from .engine_response import EngineResponse
from .inference_metadata import InferenceMetadata
from .model_type import ModelFamily, ModelType

__all__ = [
    "EngineMessage",
    "EngineRequest",
    "EngineResponse",
    "InferenceMetadata",
    "ModelFamily",
    "ModelType",
    "messages_from_pairs",
]

"""
Recognized model identifiers and their protocol families.

Each identifier belongs to exactly one family: chat-style models are served by
``/v1/chat/completions`` and completion-style models by ``/v1/completions``
(https://platform.openai.com/docs/models/model-endpoint-compatibility).
"""
from __future__ import annotations

from enum import Enum
from typing import Union


class ModelFamily(str, Enum):
    """Wire protocol family a model requires."""

    CHAT = "chat"
    COMPLETION = "completion"


class ModelType(str, Enum):
    """Closed set of model identifiers known to the engine factory."""

    # GPT-4
    GPT4 = "gpt-4"
    GPT4_0314 = "gpt-4-0314"

    # GPT-3.5
    GPT3_5_TURBO = "gpt-3.5-turbo"
    GPT3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
    TEXT_DAVINCI_003 = "text-davinci-003"
    TEXT_DAVINCI_002 = "text-davinci-002"

    # GPT-3
    TEXT_ADA_001 = "text-ada-001"
    TEXT_CURIE_001 = "text-curie-001"
    TEXT_BABBAGE_001 = "text-babbage-001"

    @property
    def family(self) -> ModelFamily:
        return _FAMILIES[self]

    @classmethod
    def parse(cls, value: Union[str, "ModelType"]) -> "ModelType":
        """Return the member for ``value``; raises ``ValueError`` if unknown."""
        if isinstance(value, cls):
            return value
        return cls((value or "").strip())


_FAMILIES = {
    ModelType.GPT4: ModelFamily.CHAT,
    ModelType.GPT4_0314: ModelFamily.CHAT,
    ModelType.GPT3_5_TURBO: ModelFamily.CHAT,
    ModelType.GPT3_5_TURBO_0301: ModelFamily.CHAT,
    ModelType.TEXT_DAVINCI_003: ModelFamily.COMPLETION,
    ModelType.TEXT_DAVINCI_002: ModelFamily.COMPLETION,
    ModelType.TEXT_ADA_001: ModelFamily.COMPLETION,
    ModelType.TEXT_CURIE_001: ModelFamily.COMPLETION,
    ModelType.TEXT_BABBAGE_001: ModelFamily.COMPLETION,
}


__all__ = ["ModelFamily", "ModelType"]

"""OpenAI completion engine (``/v1/completions``).

Serves completion-family models such as ``text-davinci-003``,
``text-davinci-002``, ``text-ada-001``, ``text-curie-001`` and
``text-babbage-001``. Only the first message's content is sent, as a
single-element prompt list; roles have no meaning on this protocol and are
never transmitted.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from ..base.constants import OPENAI_COMPLETION_ENGINE
from ..base.models import EngineMessage, EngineRequest, ModelType
from ..base.openai_style_parts import BaseOpenAIStyleEngine, CompletionsClient
from ..base.openai_style_parts.style_helpers import build_completion_params, extract_completion_text
from .client import make_openai_client

__all__ = ["OpenAICompletionEngine", "new_openai_completion_engine"]


class OpenAICompletionEngine(BaseOpenAIStyleEngine):
    """Engine adapting ``EngineRequest`` to the prompt completion protocol."""

    def __init__(self, client: CompletionsClient, model: Union[str, ModelType], *, logger_name: Optional[str] = None) -> None:
        super().__init__(client, model, logger_name=logger_name)

    @property
    def engine_name(self) -> str:
        return OPENAI_COMPLETION_ENGINE

    def _build_params(self, message: EngineMessage, request: EngineRequest) -> dict:
        return build_completion_params(self._model, message, request)

    def _create(self, params: dict, timeout: float) -> Any:
        return self._client.completions.create(**params, timeout=timeout)

    def _extract_text(self, choice: Any) -> str:
        return extract_completion_text(choice)


def new_openai_completion_engine(api_key: Optional[str], model: Union[str, ModelType], **client_kwargs: Any) -> OpenAICompletionEngine:
    """Build a completion engine bound to ``model`` with a fresh SDK client.

    As with ``new_openai_chat_engine``, the caller picks the right constructor
    for the model's family.
    """
    return OpenAICompletionEngine(make_openai_client(api_key, **client_kwargs), model)

"""OpenAI chat engine (``/v1/chat/completions``).

Serves chat-family models such as ``gpt-4``, ``gpt-4-0314``, ``gpt-3.5-turbo``
and ``gpt-3.5-turbo-0301``. The first request message is sent as a
one-element chat transcript with its role untouched; the reply is the first
choice's message content.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from ..base.constants import OPENAI_CHAT_ENGINE
from ..base.models import EngineMessage, EngineRequest, ModelType
from ..base.openai_style_parts import BaseOpenAIStyleEngine, ChatCompletionsClient
from ..base.openai_style_parts.style_helpers import build_chat_params, extract_message_text
from .client import make_openai_client

__all__ = ["OpenAIChatEngine", "new_openai_chat_engine"]


class OpenAIChatEngine(BaseOpenAIStyleEngine):
    """Engine adapting ``EngineRequest`` to the chat completions protocol."""

    def __init__(self, client: ChatCompletionsClient, model: Union[str, ModelType], *, logger_name: Optional[str] = None) -> None:
        super().__init__(client, model, logger_name=logger_name)

    @property
    def engine_name(self) -> str:
        return OPENAI_CHAT_ENGINE

    def _build_params(self, message: EngineMessage, request: EngineRequest) -> dict:
        return build_chat_params(self._model, message, request)

    def _create(self, params: dict, timeout: float) -> Any:
        return self._client.chat.completions.create(**params, timeout=timeout)

    def _extract_text(self, choice: Any) -> str:
        return extract_message_text(choice)


def new_openai_chat_engine(api_key: Optional[str], model: Union[str, ModelType], **client_kwargs: Any) -> OpenAIChatEngine:
    """Build a chat engine bound to ``model`` with a fresh SDK client.

    The model is not checked against its family; pairing a completion-only
    model with this engine fails at the backend. Use ``create_engine`` to pick
    the engine from the model instead.
    """
    return OpenAIChatEngine(make_openai_client(api_key, **client_kwargs), model)

"""
OpenAI engine package.

Exports:
- OpenAIChatEngine / new_openai_chat_engine: ``/v1/chat/completions``
- OpenAICompletionEngine / new_openai_completion_engine: ``/v1/completions``
- make_openai_client: SDK client builder shared by both
"""

from .chat_engine import OpenAIChatEngine, new_openai_chat_engine
from .client import make_openai_client
from .completion_engine import OpenAICompletionEngine, new_openai_completion_engine

__all__ = [
    "OpenAIChatEngine",
    "OpenAICompletionEngine",
    "make_openai_client",
    "new_openai_chat_engine",
    "new_openai_completion_engine",
]

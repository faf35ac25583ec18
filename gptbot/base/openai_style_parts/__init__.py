"""OpenAI-style engine base abstractions.

Re-exports provide a stable import surface for the concrete engines.
"""

from .base import BaseOpenAIStyleEngine
from .client_protocol import ChatCompletionsClient, CompletionsClient

__all__ = [
    "BaseOpenAIStyleEngine",
    "ChatCompletionsClient",
    "CompletionsClient",
]

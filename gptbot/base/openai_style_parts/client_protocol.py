"""Protocol definitions for the two OpenAI-style client surfaces.

Purpose:
- Describe the minimal client shapes the engines call into without tying them
  to a concrete SDK object. ``openai.OpenAI`` satisfies both; tests pass
  lightweight fakes.

External dependencies:
- None (typing only).
"""

from __future__ import annotations

from typing import Any, Protocol


class ChatCompletionsClient(Protocol):
    """Client exposing ``chat.completions.create(**params)``.

    The non-streaming response carries ``choices[i].message.content``.
    """

    class _ChatNS(Protocol):  # pragma: no cover - structural hint only
        class _CompletionsNS(Protocol):
            def create(self, **params: Any) -> Any:  # noqa: D401 - SDK parity
                """Create a chat completion."""
                ...

        completions: _CompletionsNS

    chat: _ChatNS


class CompletionsClient(Protocol):
    """Client exposing ``completions.create(**params)``.

    The response carries ``choices[i].text``.
    """

    class _CompletionsNS(Protocol):  # pragma: no cover - structural hint only
        def create(self, **params: Any) -> Any:  # noqa: D401 - SDK parity
            """Create a prompt completion."""
            ...

    completions: _CompletionsNS


__all__ = ["ChatCompletionsClient", "CompletionsClient"]

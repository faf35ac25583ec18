"""Convenience helper for one-shot prompts.

Sends a plain text prompt through an engine without building an
``EngineRequest`` by hand.
"""
from __future__ import annotations

from typing import Optional

from ..cancellation import CallContext
from ..constants import DEFAULT_MAX_TOKENS
from ..interfaces import Engine
from ..models import EngineRequest, EngineResponse


def simple(
    engine: Engine,
    text: str,
    *,
    ctx: Optional[CallContext] = None,
    temperature: float = 0.0,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    role: str = "user",
) -> EngineResponse:
    """Send ``text`` as a single ``role`` message and return the engine's reply.

    Parameters
    - engine: Any object implementing :class:`Engine`.
    - text: Prompt text.
    - ctx: Optional call context for cancellation and deadline.
    - temperature / max_tokens: Forwarded verbatim to the backend; ``max_tokens``
      defaults to ``DEFAULT_MAX_TOKENS`` because the API rejects values below 1.
    - role: Role tag for chat engines; completion engines ignore it.
    """
    request = EngineRequest.from_prompt(text, role=role, temperature=temperature, max_tokens=max_tokens)
    return engine.infer(ctx, request)


__all__ = ["simple"]

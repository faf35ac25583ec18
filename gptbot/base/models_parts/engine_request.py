"""
EngineRequest DTO for backend-agnostic inference calls.

Engines map this normalized request onto a backend's native parameters. Only
the first message is consumed by the current engines; trailing messages are
carried but never forwarded. Sampling values are transported as given:
engines do not clamp, default, or validate ``temperature`` and ``max_tokens``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Sequence, Tuple

from ..constants import DEFAULT_MAX_TOKENS
from .engine_message import EngineMessage


@dataclass(frozen=True)
class EngineRequest:
    """Normalized inference request.

    Attributes:
        messages: Ordered messages. A list is accepted and frozen into a tuple.
        temperature: Sampling temperature, forwarded verbatim.
        max_tokens: Maximum completion tokens, forwarded verbatim.

    Methods:
        first_message: Return the message engines forward to the backend.
        to_dict: Return a JSON-serializable dictionary of the request.
    """

    messages: Tuple[EngineMessage, ...]
    temperature: float
    max_tokens: int

    def __post_init__(self) -> None:
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    @classmethod
    def from_prompt(
        cls,
        prompt: str,
        *,
        role: str = "user",
        temperature: float = 0.0,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> "EngineRequest":
        """Build a single-message request from a prompt string.

        Unlike the constructor, the sampling values have defaults here; the
        default ``max_tokens`` is positive so the request is accepted as-is.
        """
        return cls(messages=(EngineMessage(role=role, content=prompt),), temperature=temperature, max_tokens=max_tokens)

    def first_message(self) -> EngineMessage | None:
        """Return ``messages[0]`` or ``None`` when no message was supplied."""
        return self.messages[0] if self.messages else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }


def messages_from_pairs(pairs: Sequence[Tuple[str, str]]) -> Tuple[EngineMessage, ...]:
    """Convert ``(role, content)`` pairs into a tuple of ``EngineMessage``."""
    return tuple(EngineMessage(role=r, content=c) for r, c in pairs)


__all__ = [
    "EngineRequest",
    "messages_from_pairs",
]

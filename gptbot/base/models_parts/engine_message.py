"""
EngineMessage DTO used by every engine.

A message is a role tag plus text content. The role is an open string
(``"user"``, ``"assistant"``, ``"system"`` or anything else a backend
understands); it is not validated and chat-style backends receive it verbatim.
Completion-style backends ignore it entirely.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class EngineMessage:
    """A single role-tagged message.

    Attributes:
        role: Author role tag, passed through unchanged to chat backends.
        content: Plain text content.
    """

    role: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the message."""
        return asdict(self)


__all__ = [
    "EngineMessage",
]

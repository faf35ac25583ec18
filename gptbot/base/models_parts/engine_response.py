"""
EngineResponse DTO holding the normalized reply.

``text`` is the first choice's text exactly as the backend returned it; no
trimming or unescaping happens. ``meta`` is diagnostic only and does not take
part in equality, so two responses with the same text compare equal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .inference_metadata import InferenceMetadata


@dataclass(frozen=True)
class EngineResponse:
    """Backend-agnostic result of an ``infer`` call.

    Attributes:
        text: Reply text extracted from the first choice.
        meta: Optional `InferenceMetadata` for observability.
    """

    text: str
    meta: Optional[InferenceMetadata] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "meta": self.meta.to_dict() if self.meta else None,
        }


__all__ = [
    "EngineResponse",
]

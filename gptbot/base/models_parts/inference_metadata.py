"""
Inference call metadata model.

Diagnostic details attached to an ``EngineResponse``: which engine and model
served the call, how long it took, and what the backend reported about the
first choice. Nothing here affects the normalized ``text``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class InferenceMetadata:
    """Execution metadata for one ``infer`` call.

    Attributes:
        engine_name: Canonical engine key (e.g., ``"openai.chat"``).
        model_name: Model identifier the engine is bound to.
        latency_ms: Wall time of the backend call, in milliseconds.
        response_id: Backend response identifier when available.
        finish_reason: Finish reason of the first choice when available.
        usage: Token usage mapping when the backend reports one.
    """

    engine_name: str
    model_name: str
    latency_ms: Optional[float] = None
    response_id: Optional[str] = None
    finish_reason: Optional[str] = None
    usage: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return asdict(self)


__all__ = [
    "InferenceMetadata",
]

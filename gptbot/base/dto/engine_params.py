"""Typed parameter object for engine construction.

Purpose
-------
Provide a small DTO that captures everything needed to build an engine: the
credential, the model, and optional client overrides. The factory accepts it
in place of long argument lists and merges it with explicit keyword
arguments.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Failure modes & side effects
----------------------------
- Pure data container: no I/O. Pydantic raises ``ValidationError`` for inputs
  of the wrong type (for example a non-numeric ``timeout_seconds``).
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EngineParams(BaseModel):
    """Common engine construction parameters.

    Attributes
    ----------
    api_key:
        Credential passed to the HTTP client.
    model:
        Model identifier the engine is bound to.
    base_url:
        Optional override for the API base URL (proxies, compatible gateways).
    organization:
        Optional organization hint sent by the client.
    timeout_seconds:
        Optional default request timeout for the client. A call context
        deadline still takes precedence per call.
    headers:
        Optional static HTTP headers added to every request.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    model: Optional[str] = None
    base_url: Optional[str] = None
    organization: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    headers: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("model")
    @classmethod
    def _strip_model(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if isinstance(value, str) else value

    def merged(self, **overrides: Any) -> "EngineParams":
        """Return a copy where non-``None`` ``overrides`` replace fields."""
        data: Dict[str, Any] = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return EngineParams(**data)


__all__ = ["EngineParams"]

"""gptbot.config.env
=================

Environment variable naming and helpers for backend credentials.

Design Notes
------------
- Each backend's settings live under ``<BACKEND>_<FIELD>`` (``OPENAI_API_KEY``,
  ``OPENAI_MODEL``...). ``ENV_FIELD_MAP`` maps config fields to suffixes.
- Helpers never raise on unknown backends or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

ENV_FIELD_MAP: Dict[str, str] = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "organization": "ORGANIZATION",
}


def env_var_name(backend: str, field: str) -> Optional[str]:
    """Return the environment variable for ``field`` of ``backend`` (``None`` if unmapped)."""
    suffix = ENV_FIELD_MAP.get(field)
    if not suffix or not backend:
        return None
    return f"{backend.strip().upper()}_{suffix}"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder rather than a real setting.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def env_overrides(backend: str) -> Dict[str, str]:
    """Collect the non-empty ``<BACKEND>_*`` variables."""
    out: Dict[str, str] = {}
    for field in ENV_FIELD_MAP:
        name = env_var_name(backend, field)
        val = os.getenv(name) if name else None
        if val:
            out[field] = val
    return out


__all__ = [
    "ENV_FIELD_MAP",
    "env_var_name",
    "env_overrides",
    "is_placeholder",
]

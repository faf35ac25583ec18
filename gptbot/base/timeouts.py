"""Timeout configuration for engine HTTP calls.

Centralizes the default per-request timeout handed to the HTTP client when the
caller's ``CallContext`` carries no deadline. When a deadline is present the
remaining time wins, capped by nothing: a caller asking for a long deadline
gets it.

Environment variables (all optional, positive floats):
    GPTBOT_HTTP_TIMEOUT_SECONDS
    GPTBOT_CONNECT_TIMEOUT_SECONDS

The parsed configuration is cached and refreshed only when the environment
values change, so tests can adjust them with ``monkeypatch``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read timeout for a single backend call.
        connect_timeout_seconds: TCP connect timeout.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float; return ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(
        [
            os.getenv("GPTBOT_HTTP_TIMEOUT_SECONDS", ""),
            os.getenv("GPTBOT_CONNECT_TIMEOUT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("GPTBOT_HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT),
        connect_timeout_seconds=_parse_env_float("GPTBOT_CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT),
    )
    _ENV_GUARD = guard
    return _CACHED


def resolve_request_timeout(remaining: Optional[float]) -> float:
    """Return the per-request timeout: the context's remaining time, else the default."""
    if remaining is not None:
        return remaining
    return get_timeout_config().http_timeout_seconds


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "resolve_request_timeout",
]

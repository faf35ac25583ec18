"""OpenAI SDK client construction.

Builds the ``openai.OpenAI`` instance an engine owns. The client is the only
place credentials, base URL, and transport settings live; engines receive it
ready to use.

Retry policy: the SDK retries failed requests by default. Engines perform
exactly one backend call per ``infer``, so every client built here sets
``max_retries=0``.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx
import openai

from ..base.constants import CLIENT_MAX_RETRIES
from ..base.timeouts import get_timeout_config

__all__ = ["make_openai_client"]


def make_openai_client(
    api_key: Optional[str],
    *,
    base_url: Optional[str] = None,
    organization: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> openai.OpenAI:
    """Return an ``openai.OpenAI`` client configured with the given credential.

    Args:
        api_key: Credential for the ``Authorization`` header. ``None`` lets the
            SDK fall back to ``OPENAI_API_KEY`` (and raise if that is unset).
        base_url: Optional API base URL override.
        organization: Optional organization header.
        timeout_seconds: Default read timeout; falls back to
            ``GPTBOT_HTTP_TIMEOUT_SECONDS`` / the built-in default.
        headers: Optional static headers added to every request.
    """
    cfg = get_timeout_config()
    timeout = httpx.Timeout(
        timeout_seconds or cfg.http_timeout_seconds,
        connect=cfg.connect_timeout_seconds,
    )
    return openai.OpenAI(
        api_key=api_key,
        base_url=base_url,
        organization=organization,
        timeout=timeout,
        max_retries=CLIENT_MAX_RETRIES,
        default_headers=dict(headers) if headers else None,
    )

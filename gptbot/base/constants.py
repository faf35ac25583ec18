"""Base shared constants for engines.

Central location to avoid scattering magic strings and default numbers.
"""
from __future__ import annotations

# Engine keys used in logs, metadata and errors
OPENAI_CHAT_ENGINE = "openai.chat"
OPENAI_COMPLETION_ENGINE = "openai.completion"

# Default HTTP timeouts (seconds)
DEFAULT_HTTP_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0

# Completion budget used when a caller builds a request from a bare prompt.
# The API rejects max_tokens below 1.
DEFAULT_MAX_TOKENS = 256

# Engines never retry; the openai SDK retries twice unless told otherwise.
CLIENT_MAX_RETRIES = 0

__all__ = [
    "OPENAI_CHAT_ENGINE",
    "OPENAI_COMPLETION_ENGINE",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "CLIENT_MAX_RETRIES",
    "DEFAULT_MAX_TOKENS",
]

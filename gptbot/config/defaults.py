"""gptbot.config.defaults
======================

Small, stable default values for the configuration layer. These can be
overridden by an external config file, the environment, or explicit
overrides. No I/O and no imports from other gptbot packages.
"""

from __future__ import annotations

# Default model when neither config nor caller names one.
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"

# ``None`` lets the SDK use its own endpoint.
OPENAI_DEFAULT_BASE_URL = None

# Environment variable naming the optional JSON/YAML config file.
CONFIG_FILE_ENV = "GPTBOT_CONFIG_FILE"

# Environment variable naming the optional dotenv file (default ``.env``).
DOTENV_FILE_ENV = "DOTENV_FILE"

__all__ = [
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
]

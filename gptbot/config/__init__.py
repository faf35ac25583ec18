"""Unified configuration layer for engines.

Goals
-----
* Centralize defaults (model, base URL).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by GPTBOT_CONFIG_FILE
    3. Environment variables (OPENAI_API_KEY, OPENAI_MODEL, OPENAI_BASE_URL,
       OPENAI_ORGANIZATION), after loading a ``.env`` file if present
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_engine_config(backend)``.

External Config File
--------------------
JSON is tried first, then YAML. Structure example::

    openai:
      model: gpt-4
      base_url: https://proxy.internal/v1
      timeout_seconds: 20

Public API
----------
* get_engine_config(backend: str, overrides: dict | None = None) -> dict
* get_model(backend: str) -> str | None
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import CONFIG_FILE_ENV, DOTENV_FILE_ENV, OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL
from .env import env_overrides, is_placeholder

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables win unless they hold a placeholder value.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV) or ""
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    p = Path(path)
    _FILE_CACHE = _parse_config_text(p.read_text(encoding="utf-8")) if path and p.is_file() else {}
    _FILE_CACHE_PATH = path
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and allow the ``.env`` file to be re-read."""
    global _FILE_CACHE, _FILE_CACHE_PATH, _DOTENV_LOADED
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None
    _DOTENV_LOADED = False


def get_engine_config(backend: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a backend.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    name = (backend or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def get_model(backend: str) -> Optional[str]:
    return get_engine_config(backend).get("model")


__all__ = [
    "get_engine_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]

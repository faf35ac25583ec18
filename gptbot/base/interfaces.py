"""
Backend-agnostic interfaces (Protocols) for the engine layer.

This module re-exports Protocols split into single-class modules under
``gptbot.base.interfaces_parts`` while keeping imports stable for callers.
"""

from __future__ import annotations

from .interfaces_parts import Engine, HasModel

__all__ = [
    "Engine",
    "HasModel",
]

"""Interfaces (Protocols) split into single-class modules.

``gptbot.base.interfaces`` re-exports these as the stable API.
"""

from .engine import Engine
from .has_model import HasModel

__all__ = [
    "Engine",
    "HasModel",
]

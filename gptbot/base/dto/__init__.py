"""DTO package for engine construction parameters."""

from .engine_params import EngineParams

__all__ = [
    "EngineParams",
]

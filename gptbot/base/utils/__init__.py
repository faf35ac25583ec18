"""Small convenience helpers built on the engine contract."""

from .simple import simple

__all__ = ["simple"]

"""HasModel Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasModel(Protocol):
    """Engines expose the model identifier and engine key they are bound to."""

    @property
    def engine_name(self) -> str:
        """Canonical engine identifier, e.g. ``"openai.chat"``."""
        ...

    @property
    def model(self) -> str:
        ...

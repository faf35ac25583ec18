"""Engine factory utilities.

Purpose
-------
Pick and build the right engine for a model. The two direct constructors
(``new_openai_chat_engine`` / ``new_openai_completion_engine``) leave the
choice to the caller; ``EngineFactory.create`` looks the model up in
``ModelType`` and dispatches on its ``ModelFamily``, so a chat model can never
be paired with the completion protocol by mistake.

Engine modules are imported lazily with ``importlib`` to keep the SDK import
out of ``gptbot.base``.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an engine or raises a clear error.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple, Type, Union

from .dto.engine_params import EngineParams
from .models import ModelFamily, ModelType


class UnknownModelError(Exception):
    """Raised when a model cannot be mapped to an engine.

    Failure modes include:
    - No model was given at all.
    - The model is not a recognized ``ModelType``.
    - The engine module cannot be imported or the engine class is missing.
    """


class EngineFactory:
    """Create engines from a model identifier.

    Design notes
    ------------
    - ``_ENGINES`` maps each ``ModelFamily`` to the module and class serving it.
    - ``create`` merges an optional ``EngineParams`` with keyword arguments,
      explicit keyword arguments winning.
    """

    _ENGINES: Dict[ModelFamily, Dict[str, str]] = {
        ModelFamily.CHAT: {"module": "gptbot.openai.chat_engine", "class": "OpenAIChatEngine"},
        ModelFamily.COMPLETION: {"module": "gptbot.openai.completion_engine", "class": "OpenAICompletionEngine"},
    }

    @classmethod
    def resolve_family(cls, model: Union[str, ModelType, None]) -> ModelFamily:
        """Return the protocol family for ``model``.

        Raises
        ------
        UnknownModelError
            If ``model`` is empty or not a recognized ``ModelType``.
        """
        if not model:
            raise UnknownModelError("no model given")
        try:
            return ModelType.parse(model).family
        except ValueError as exc:
            raise UnknownModelError(f"Unknown model '{model}'") from exc

    @classmethod
    def engine_class(cls, family: ModelFamily) -> Type:
        """Import and return the engine class serving ``family``."""
        spec = cls._ENGINES.get(family)
        if not spec:
            raise UnknownModelError(f"No engine registered for family '{family.value}'")
        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise UnknownModelError(f"Failed to import module '{module_path}' for family '{family.value}': {exc}") from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownModelError(f"Engine class '{class_name}' not found in '{module_path}'") from exc

    @classmethod
    def create(
        cls,
        model: Union[str, ModelType, None] = None,
        *,
        params: Optional[EngineParams] = None,
        client: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Create the engine serving ``model``.

        Parameters
        ----------
        model:
            Model identifier; overrides ``params.model`` when given.
        params:
            Optional :class:`EngineParams`; keyword arguments take precedence.
        client:
            Optional pre-built client. When omitted an ``openai.OpenAI`` client
            is built from the merged parameters.
        **kwargs:
            ``EngineParams`` fields (``api_key``, ``base_url``...).

        Returns
        -------
        Any
            An engine implementing ``Engine``.

        Raises
        ------
        UnknownModelError
            If the model is unknown or its engine cannot be loaded.
        """
        merged = (params or EngineParams()).merged(model=model.value if isinstance(model, ModelType) else model, **kwargs)
        family = cls.resolve_family(merged.model)
        klass = cls.engine_class(family)
        if client is None:
            from ..openai.client import make_openai_client

            client = make_openai_client(
                merged.api_key,
                base_url=merged.base_url,
                organization=merged.organization,
                timeout_seconds=merged.timeout_seconds,
                headers=merged.headers,
            )
        return klass(client, merged.model)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the recognized model identifiers in declaration order."""
        return tuple(m.value for m in ModelType)


def create_engine(api_key: Optional[str], model: Union[str, ModelType], **kwargs: Any) -> Any:
    """Build the engine for ``model`` using ``api_key``; see :meth:`EngineFactory.create`."""
    return EngineFactory.create(model, api_key=api_key, **kwargs)


def engine_from_config(
    model: Union[str, ModelType, None] = None,
    *,
    backend: str = "openai",
    overrides: Optional[Dict[str, Any]] = None,
    client: Any = None,
) -> Any:
    """Build an engine from the merged configuration of ``backend``.

    ``model`` (when given) beats the configured model; ``overrides`` are applied
    on top of defaults, config file, and environment as in
    :func:`gptbot.config.get_engine_config`.
    """
    from ..config import get_engine_config

    cfg = get_engine_config(backend, overrides)
    params = EngineParams(
        api_key=cfg.get("api_key"),
        model=cfg.get("model"),
        base_url=cfg.get("base_url"),
        organization=cfg.get("organization"),
        timeout_seconds=cfg.get("timeout_seconds"),
        headers=cfg.get("headers") or {},
    )
    return EngineFactory.create(model, params=params, client=client)


__all__ = ["EngineFactory", "UnknownModelError", "create_engine", "engine_from_config"]

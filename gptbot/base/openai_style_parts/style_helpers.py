"""
Helper utilities shared by the OpenAI-style engines.

Purpose:
- Translate ``EngineRequest`` into chat and completion parameter dicts.
- Invoke the client and wrap its failures in ``TransportError``.
- Pull the first choice out of a response, failing loudly when there is none.

External dependencies:
- Engine DTOs and the error taxonomy only. No network I/O happens here
  except through the callable handed to ``invoke_backend``.

Translation rules:
- Only ``messages[0]`` is forwarded; trailing messages are ignored.
- ``temperature`` and ``max_tokens`` are copied as-is: zero and negative
  values reach the backend unchanged.
"""

from __future__ import annotations

import typing as _t

from ..cancellation import CancelledError
from ..errors import (
    EmptyResponseError,
    EngineError,
    ErrorCode,
    RequestValidationError,
    TransportError,
    classify_exception,
)
from ..models import EngineMessage, EngineRequest


def require_first_message(request: EngineRequest, *, engine: str, model: str) -> EngineMessage:
    """Return ``request.messages[0]`` or raise ``RequestValidationError``."""
    message = request.first_message()
    if message is None:
        raise RequestValidationError(
            code=ErrorCode.VALIDATION,
            message="request has no messages",
            engine=engine,
            model=model,
        )
    return message


def build_chat_params(model: str, message: EngineMessage, request: EngineRequest) -> dict:
    """Assemble parameters for ``chat.completions.create``.

    Parameters:
        model: The model identifier string.
        message: The message to forward; role and content pass through verbatim.
        request: The original request carrying sampling values.

    Returns:
        A dict suitable for ``client.chat.completions.create(**params)``.
    """
    return {
        "model": model,
        "messages": [{"role": message.role, "content": message.content}],
        "temperature": request.temperature,
        "max_tokens": request.max_tokens,
    }


def build_completion_params(model: str, message: EngineMessage, request: EngineRequest) -> dict:
    """Assemble parameters for ``completions.create``.

    The role is dropped: completion backends only receive the content, as a
    single-element prompt list.
    """
    return {
        "model": model,
        "prompt": [message.content],
        "temperature": request.temperature,
        "max_tokens": request.max_tokens,
    }


def invoke_backend(call: _t.Callable[[], _t.Any], *, engine: str, model: str) -> _t.Any:
    """Run ``call`` and wrap any client failure in ``TransportError``.

    The original exception is kept in ``raw`` and chained as ``__cause__``;
    its ``code`` comes from :func:`classify_exception`. Engine errors and
    cancellations raised by the call itself pass through unchanged.

    Raises:
        TransportError: For every failure reported by the client.
    """
    try:
        return call()
    except (EngineError, CancelledError):
        raise
    except Exception as e:  # noqa: BLE001 - every client failure is a transport failure
        raise TransportError(
            code=classify_exception(e),
            message=str(e) or type(e).__name__,
            engine=engine,
            model=model,
            raw=e,
        ) from e


def first_choice(resp: _t.Any, *, engine: str, model: str) -> _t.Any:
    """Return ``resp.choices[0]``; raise ``EmptyResponseError`` when there are none."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        raise EmptyResponseError(
            code=ErrorCode.EMPTY_RESPONSE,
            message="backend returned no choices",
            engine=engine,
            model=model,
        )
    return choices[0]


def extract_message_text(choice: _t.Any) -> str:
    """Return ``choice.message.content``; a missing or null content becomes ``""``."""
    message = getattr(choice, "message", None)
    content = getattr(message, "content", None)
    return content if content is not None else ""


def extract_completion_text(choice: _t.Any) -> str:
    """Return ``choice.text``; a missing or null text becomes ``""``."""
    text = getattr(choice, "text", None)
    return text if text is not None else ""


def usage_to_dict(resp: _t.Any) -> dict:
    """Return the response's token usage as a plain dict (empty when absent)."""
    usage = getattr(resp, "usage", None)
    if usage is None:
        return {}
    if isinstance(usage, dict):
        return dict(usage)
    dump = getattr(usage, "model_dump", None)
    if callable(dump):
        return {k: v for k, v in dump().items() if v is not None}
    return {
        k: getattr(usage, k)
        for k in ("prompt_tokens", "completion_tokens", "total_tokens")
        if getattr(usage, k, None) is not None
    }


__all__ = [
    "require_first_message",
    "build_chat_params",
    "build_completion_params",
    "invoke_backend",
    "first_choice",
    "extract_message_text",
    "extract_completion_text",
    "usage_to_dict",
]

"""BaseOpenAIStyleEngine: shared ``infer`` orchestration.

Purpose:
- Give the chat and completion engines one implementation of the call
  sequence (context check, translation, single backend call, extraction,
  logging) so each subclass only supplies the three protocol-specific steps.

External dependencies:
- The HTTP client is supplied by the caller or the factory; this module does
  not import the SDK and performs no I/O of its own.

Failure semantics:
- Exactly one backend call per ``infer``; nothing is retried or cached.
- Client failures surface as ``TransportError`` carrying the original error.
- Zero choices surface as ``EmptyResponseError``.

Cancellation:
- The client call runs under ``run_cancellable``: cancelling the context token
  while the call is in flight raises ``CancelledError`` immediately and the
  late result is discarded.

Timeout strategy:
- The call context's remaining time (or the configured default) is passed to
  the client as its per-request ``timeout``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Union

from ..cancellation import CallContext, CancelledError, run_cancellable
from ..errors import EngineError, ErrorCode
from ..interfaces import Engine, HasModel
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import EngineMessage, EngineRequest, EngineResponse, InferenceMetadata, ModelType
from ..timeouts import resolve_request_timeout
from .style_helpers import first_choice, invoke_backend, require_first_message, usage_to_dict


class BaseOpenAIStyleEngine(Engine, HasModel):
    """Reusable base class for OpenAI-style engines.

    Subclasses must implement:
    - ``engine_name``: canonical engine identifier.
    - ``_build_params``: translate the forwarded message and request.
    - ``_create``: issue the client call.
    - ``_extract_text``: read the reply text from the first choice.
    """

    def __init__(self, client: Any, model: Union[str, ModelType], *, logger_name: Optional[str] = None) -> None:
        """Bind the engine to an HTTP client and a model identifier.

        Parameters:
            client: Client object the engine owns for its lifetime.
            model: Model identifier, as a string or ``ModelType`` member.
            logger_name: Optional logger name; defaults to ``gptbot.<engine_name>``.
        """
        self._client = client
        self._model = model.value if isinstance(model, ModelType) else str(model)
        self._logger = get_logger(logger_name or self.engine_name)

    # ----- Abstract surface -----
    @property
    def engine_name(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def _build_params(self, message: EngineMessage, request: EngineRequest) -> dict:  # pragma: no cover - abstract
        raise NotImplementedError

    def _create(self, params: dict, timeout: float) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _extract_text(self, choice: Any) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Basic info -----
    @property
    def model(self) -> str:
        return self._model

    @property
    def client(self) -> Any:
        return self._client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self._model!r})"

    # ----- Inference -----
    def infer(self, ctx: Optional[CallContext], request: EngineRequest) -> EngineResponse:
        """Translate ``request``, call the backend once, and normalize the reply.

        Parameters:
            ctx: Call context carrying cancellation and deadline; ``None`` means
                no cancellation and the configured default timeout.
            request: Normalized request; only ``messages[0]`` is forwarded.

        Returns:
            ``EngineResponse`` whose ``text`` is the first choice's text.

        Raises:
            RequestValidationError: ``request.messages`` is empty.
            CancelledError: ``ctx`` was cancelled or its deadline passed.
            TransportError: The client failed.
            EmptyResponseError: The backend returned zero choices.
        """
        ctx = ctx or CallContext.background()
        log_ctx = LogContext(engine=self.engine_name, model=self._model)
        try:
            message = require_first_message(request, engine=self.engine_name, model=self._model)
            ctx.raise_if_done()
            params = self._build_params(message, request)
            timeout = resolve_request_timeout(ctx.remaining())
            self._log_start(log_ctx, request, timeout)

            t0 = time.perf_counter()
            resp = invoke_backend(
                lambda: run_cancellable(lambda: self._create(params, timeout), ctx.token),
                engine=self.engine_name,
                model=self._model,
            )
            latency_ms = (time.perf_counter() - t0) * 1000.0

            choice = first_choice(resp, engine=self.engine_name, model=self._model)
            text = self._extract_text(choice)
        except EngineError as exc:
            self._log_error(log_ctx, exc.code.value, exc)
            raise
        except CancelledError as exc:
            self._log_error(log_ctx, (ErrorCode.TIMEOUT if exc.deadline_exceeded else ErrorCode.CANCELLED).value, exc)
            raise

        meta = InferenceMetadata(
            engine_name=self.engine_name,
            model_name=self._model,
            latency_ms=latency_ms,
            response_id=getattr(resp, "id", None),
            finish_reason=getattr(choice, "finish_reason", None),
            usage=usage_to_dict(resp),
        )
        self._log_end(log_ctx, meta, text)
        return EngineResponse(text=text, meta=meta)

    # ----- logging helpers -----
    def _log_start(self, log_ctx: LogContext, request: EngineRequest, timeout: float) -> None:
        normalized_log_event(
            self._logger,
            "infer.start",
            log_ctx,
            phase="start",
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            messages_supplied=len(request.messages),
            timeout_s=timeout,
        )

    def _log_end(self, log_ctx: LogContext, meta: InferenceMetadata, text: str) -> None:
        normalized_log_event(
            self._logger,
            "infer.end",
            log_ctx,
            phase="finalize",
            emitted=bool(text),
            tokens=meta.usage or None,
            latency_ms=meta.latency_ms,
            response_id=meta.response_id,
            finish_reason=meta.finish_reason,
        )

    def _log_error(self, log_ctx: LogContext, code: str, exc: BaseException) -> None:
        normalized_log_event(
            self._logger,
            "infer.error",
            log_ctx,
            phase="finalize",
            error_code=code,
            error=str(exc),
            level=logging.WARNING,
        )


__all__ = ["BaseOpenAIStyleEngine"]

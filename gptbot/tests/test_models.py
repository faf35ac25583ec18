"""Tests for the normalized data model DTOs and the model catalog."""
from __future__ import annotations

import dataclasses

import pytest

from gptbot.base.constants import DEFAULT_MAX_TOKENS
from gptbot.base.models import (
    EngineMessage,
    EngineRequest,
    EngineResponse,
    InferenceMetadata,
    ModelFamily,
    ModelType,
    messages_from_pairs,
)


def test_request_freezes_message_list():
    source = [EngineMessage("user", "a")]
    req = EngineRequest(messages=source, temperature=0.5, max_tokens=5)
    source.append(EngineMessage("user", "b"))
    assert req.messages == (EngineMessage("user", "a"),)  # nosec B101
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.temperature = 1.0  # type: ignore[misc]


def test_request_requires_sampling_values():
    with pytest.raises(TypeError):
        EngineRequest(messages=[EngineMessage("user", "a")])  # type: ignore[call-arg]


def test_from_prompt_default_token_budget_is_positive():
    req = EngineRequest.from_prompt("hello")
    assert req.max_tokens == DEFAULT_MAX_TOKENS  # nosec B101
    assert req.max_tokens >= 1  # nosec B101
    assert req.temperature == 0.0  # nosec B101


def test_request_helpers():
    req = EngineRequest.from_prompt("hi", role="system", temperature=0.3, max_tokens=7)
    assert req.first_message() == EngineMessage(role="system", content="hi")  # nosec B101
    assert req.to_dict() == {  # nosec B101
        "messages": [{"role": "system", "content": "hi"}],
        "temperature": 0.3,
        "max_tokens": 7,
    }
    assert EngineRequest(messages=(), temperature=0.0, max_tokens=1).first_message() is None  # nosec B101
    assert messages_from_pairs([("user", "q"), ("assistant", "a")])[1] == EngineMessage("assistant", "a")  # nosec B101


def test_response_equality_ignores_meta():
    meta = InferenceMetadata(engine_name="openai.chat", model_name="gpt-4", latency_ms=12.0)
    assert EngineResponse(text="x", meta=meta) == EngineResponse(text="x")  # nosec B101
    assert EngineResponse(text="x") != EngineResponse(text="y")  # nosec B101
    assert EngineResponse(text="x", meta=meta).to_dict()["meta"]["latency_ms"] == 12.0  # nosec B101
    assert EngineResponse(text="x").to_dict() == {"text": "x", "meta": None}  # nosec B101


@pytest.mark.parametrize(
    "model,family",
    [
        ("gpt-4", ModelFamily.CHAT),
        ("gpt-4-0314", ModelFamily.CHAT),
        ("gpt-3.5-turbo", ModelFamily.CHAT),
        ("gpt-3.5-turbo-0301", ModelFamily.CHAT),
        ("text-davinci-003", ModelFamily.COMPLETION),
        ("text-davinci-002", ModelFamily.COMPLETION),
        ("text-ada-001", ModelFamily.COMPLETION),
        ("text-curie-001", ModelFamily.COMPLETION),
        ("text-babbage-001", ModelFamily.COMPLETION),
    ],
)
def test_every_model_has_a_family(model, family):
    assert ModelType.parse(model).family is family  # nosec B101


def test_model_type_parse():
    assert ModelType.parse(ModelType.GPT4) is ModelType.GPT4  # nosec B101
    assert ModelType.parse(" gpt-4 ") is ModelType.GPT4  # nosec B101
    assert ModelType.GPT3_5_TURBO == "gpt-3.5-turbo"  # nosec B101
    with pytest.raises(ValueError):
        ModelType.parse("davinci")

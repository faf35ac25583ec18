"""Unit tests for OpenAIChatEngine using a fake chat completions client.

Covers:
- Scenario: single user message round-trips to the first choice's content.
- Only ``messages[0]`` is forwarded; role and content pass through verbatim.
- ``temperature`` / ``max_tokens`` pass through untouched, including zero and negatives.
- Metadata and structured log events for a successful call.
"""

from __future__ import annotations

import pytest

from gptbot.base.cancellation import CallContext
from gptbot.base.interfaces import Engine
from gptbot.base.models import EngineMessage, EngineRequest, EngineResponse, ModelType
from gptbot.openai import OpenAIChatEngine

from .fakes import FakeChatClient, chat_response


def _request(*messages: EngineMessage, temperature: float = 0.7, max_tokens: int = 50) -> EngineRequest:
    return EngineRequest(messages=list(messages), temperature=temperature, max_tokens=max_tokens)


def test_chat_engine_satisfies_engine_protocol():
    engine = OpenAIChatEngine(FakeChatClient(), ModelType.GPT3_5_TURBO)
    assert isinstance(engine, Engine)  # nosec B101
    assert engine.model == "gpt-3.5-turbo"  # nosec B101
    assert engine.engine_name == "openai.chat"  # nosec B101


def test_chat_engine_scenario_hello():
    client = FakeChatClient(chat_response("hi there"))
    engine = OpenAIChatEngine(client, "gpt-3.5-turbo")

    resp = engine.infer(None, _request(EngineMessage(role="user", content="hello")))

    assert resp == EngineResponse(text="hi there")  # nosec B101
    assert len(client.calls) == 1  # nosec B101
    call = client.calls[0]
    assert call["model"] == "gpt-3.5-turbo"  # nosec B101
    assert call["messages"] == [{"role": "user", "content": "hello"}]  # nosec B101
    assert call["temperature"] == 0.7  # nosec B101
    assert call["max_tokens"] == 50  # nosec B101


@pytest.mark.parametrize(
    "content,reply",
    [
        ("  padded  ", "  also padded\n"),
        ("<b>\"quoted\"</b> \\n", "café ☃ \U0001f600"),
        ("", ""),
    ],
)
def test_chat_engine_passes_content_byte_for_byte(content, reply):
    client = FakeChatClient(chat_response(reply))
    engine = OpenAIChatEngine(client, "gpt-4")

    resp = engine.infer(None, _request(EngineMessage(role="user", content=content)))

    assert resp.text == reply  # nosec B101
    assert client.calls[0]["messages"][0]["content"] == content  # nosec B101


def test_chat_engine_forwards_unknown_role_unchanged():
    client = FakeChatClient()
    engine = OpenAIChatEngine(client, "gpt-4")

    engine.infer(None, _request(EngineMessage(role="narrator", content="once upon a time")))

    assert client.calls[0]["messages"] == [{"role": "narrator", "content": "once upon a time"}]  # nosec B101


def test_chat_engine_forwards_only_first_message():
    first = EngineMessage(role="system", content="be brief")
    single = FakeChatClient(chat_response("same"))
    multi = FakeChatClient(chat_response("same"))

    r1 = OpenAIChatEngine(single, "gpt-4").infer(None, _request(first))
    r2 = OpenAIChatEngine(multi, "gpt-4").infer(
        None,
        _request(
            first,
            EngineMessage(role="user", content="ignored"),
            EngineMessage(role="assistant", content="also ignored"),
        ),
    )

    assert r1 == r2  # nosec B101
    assert single.calls[0] == multi.calls[0]  # nosec B101
    assert multi.calls[0]["messages"] == [{"role": "system", "content": "be brief"}]  # nosec B101


@pytest.mark.parametrize("temperature,max_tokens", [(0.0, 0), (-1.5, -20), (2.7, 100000)])
def test_chat_engine_passes_numerics_through(temperature, max_tokens):
    client = FakeChatClient()
    engine = OpenAIChatEngine(client, "gpt-4")

    engine.infer(None, _request(EngineMessage(role="user", content="x"), temperature=temperature, max_tokens=max_tokens))

    assert client.calls[0]["temperature"] == temperature  # nosec B101
    assert client.calls[0]["max_tokens"] == max_tokens  # nosec B101


def test_chat_engine_uses_first_of_several_choices():
    engine = OpenAIChatEngine(FakeChatClient(chat_response("first", "second")), "gpt-4")
    resp = engine.infer(None, EngineRequest.from_prompt("x"))
    assert resp.text == "first"  # nosec B101


def test_chat_engine_null_content_becomes_empty_text():
    engine = OpenAIChatEngine(FakeChatClient(chat_response(None)), "gpt-4")
    resp = engine.infer(None, EngineRequest.from_prompt("x"))
    assert resp.text == ""  # nosec B101


def test_chat_engine_passes_context_deadline_as_timeout():
    client = FakeChatClient()
    engine = OpenAIChatEngine(client, "gpt-4")

    engine.infer(CallContext.with_timeout(5.0), EngineRequest.from_prompt("x"))

    timeout = client.calls[0]["timeout"]
    assert 0 < timeout <= 5.0  # nosec B101


def test_chat_engine_default_timeout_without_deadline(monkeypatch):
    monkeypatch.setenv("GPTBOT_HTTP_TIMEOUT_SECONDS", "12.5")
    client = FakeChatClient()
    OpenAIChatEngine(client, "gpt-4").infer(CallContext.background(), EngineRequest.from_prompt("x"))
    assert client.calls[0]["timeout"] == 12.5  # nosec B101


def test_chat_engine_metadata_and_logs(log_records):
    usage = {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5}
    engine = OpenAIChatEngine(FakeChatClient(chat_response("hi", response_id="chatcmpl-42", usage=usage)), "gpt-4")

    resp = engine.infer(None, EngineRequest.from_prompt("hello"))

    assert resp.meta is not None  # nosec B101
    assert resp.meta.engine_name == "openai.chat"  # nosec B101
    assert resp.meta.model_name == "gpt-4"  # nosec B101
    assert resp.meta.response_id == "chatcmpl-42"  # nosec B101
    assert resp.meta.finish_reason == "stop"  # nosec B101
    assert resp.meta.usage == usage  # nosec B101
    assert resp.meta.latency_ms is not None and resp.meta.latency_ms >= 0  # nosec B101

    start = log_records.events("infer.start")
    end = log_records.events("infer.end")
    assert len(start) == 1 and len(end) == 1  # nosec B101
    assert start[0]["engine"] == "openai.chat"  # nosec B101
    assert start[0]["model"] == "gpt-4"  # nosec B101
    assert start[0]["phase"] == "start"  # nosec B101
    assert end[0]["tokens"] == usage  # nosec B101
    assert end[0]["emitted"] is True  # nosec B101
    assert "error_code" not in end[0]  # nosec B101


def test_chat_engine_is_reusable_across_calls():
    client = FakeChatClient(chat_response("again"))
    engine = OpenAIChatEngine(client, "gpt-4")
    for prompt in ("a", "b", "c"):
        assert engine.infer(None, EngineRequest.from_prompt(prompt)).text == "again"  # nosec B101
    assert [c["messages"][0]["content"] for c in client.calls] == ["a", "b", "c"]  # nosec B101

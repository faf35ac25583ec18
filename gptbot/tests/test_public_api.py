from __future__ import annotations

import gptbot
from gptbot import Engine, EngineMessage, EngineRequest, OpenAIChatEngine, simple

from .fakes import FakeChatClient, chat_response


def test_public_names_resolve():
    for name in gptbot.__all__:
        assert hasattr(gptbot, name), name  # nosec B101
    assert gptbot.__version__ == "0.1.0"  # nosec B101


def test_engine_contract_is_backend_agnostic():
    def ask(engine: Engine, prompt: str) -> str:
        return engine.infer(None, EngineRequest(messages=[EngineMessage("user", prompt)], temperature=0.0, max_tokens=32)).text

    engine = OpenAIChatEngine(FakeChatClient(chat_response("fine")), "gpt-4")
    assert ask(engine, "how are you") == "fine"  # nosec B101
    assert simple(engine, "again").text == "fine"  # nosec B101

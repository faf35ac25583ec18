from __future__ import annotations

import json

from gptbot.config import DEFAULTS, get_engine_config, get_model, reset_config_cache
from gptbot.config.env import ENV_FIELD_MAP, env_overrides, env_var_name, is_placeholder


def test_env_field_map_contains_expected_keys():
    for field in ["model", "api_key", "base_url", "organization"]:
        assert field in ENV_FIELD_MAP  # nosec B101


def test_env_var_name():
    assert env_var_name("openai", "api_key") == "OPENAI_API_KEY"  # nosec B101
    assert env_var_name(" openai ", "model") == "OPENAI_MODEL"  # nosec B101
    assert env_var_name("openai", "temperature") is None  # nosec B101
    assert env_var_name("", "model") is None  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("example-key")  # nosec B101
    assert is_placeholder("test_token")  # nosec B101
    assert not is_placeholder("real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_env_overrides_skip_empty(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_BASE_URL", "")
    assert env_overrides("openai") == {"api_key": "sk-env"}  # nosec B101


def test_defaults_only():
    cfg = get_engine_config("openai")
    assert cfg == DEFAULTS["openai"]  # nosec B101
    assert get_model("openai") == "gpt-3.5-turbo"  # nosec B101
    assert get_engine_config("unknown-backend") == {}  # nosec B101


def test_env_beats_defaults_and_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4")
    monkeypatch.setenv("OPENAI_ORGANIZATION", "org-env")
    cfg = get_engine_config("OpenAI", {"organization": "org-explicit", "api_key": None})
    assert cfg["model"] == "gpt-4"  # nosec B101
    assert cfg["organization"] == "org-explicit"  # nosec B101
    assert "api_key" not in cfg  # nosec B101


def test_json_config_file(monkeypatch, tmp_path):
    path = tmp_path / "gptbot.json"
    path.write_text(json.dumps({"openai": {"model": "text-davinci-003", "timeout_seconds": 20}}), encoding="utf-8")
    monkeypatch.setenv("GPTBOT_CONFIG_FILE", str(path))
    cfg = get_engine_config("openai")
    assert cfg["model"] == "text-davinci-003"  # nosec B101
    assert cfg["timeout_seconds"] == 20  # nosec B101


def test_yaml_config_file_below_env(monkeypatch, tmp_path):
    path = tmp_path / "gptbot.yaml"
    path.write_text("openai:\n  model: gpt-4\n  base_url: https://proxy.internal/v1\n", encoding="utf-8")
    monkeypatch.setenv("GPTBOT_CONFIG_FILE", str(path))
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4-0314")
    cfg = get_engine_config("openai")
    assert cfg["model"] == "gpt-4-0314"  # nosec B101
    assert cfg["base_url"] == "https://proxy.internal/v1"  # nosec B101


def test_missing_or_non_mapping_config_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("GPTBOT_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    assert get_engine_config("openai") == DEFAULTS["openai"]  # nosec B101

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    monkeypatch.setenv("GPTBOT_CONFIG_FILE", str(listing))
    assert get_engine_config("openai") == DEFAULTS["openai"]  # nosec B101


def test_dotenv_fills_unset_and_placeholder_vars(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text(
        "# local credentials\n"
        "OPENAI_API_KEY='sk-from-dotenv'\n"
        "OPENAI_MODEL=text-ada-001\n"
        "\n"
        "not a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    monkeypatch.setenv("OPENAI_MODEL", "changeme")
    # values written by the loader must not leak into other tests
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.delenv("OPENAI_API_KEY")
    reset_config_cache()

    cfg = get_engine_config("openai")
    assert cfg["api_key"] == "sk-from-dotenv"  # nosec B101
    assert cfg["model"] == "text-ada-001"  # nosec B101


def test_dotenv_does_not_override_real_env(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("OPENAI_MODEL=text-ada-001\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4")
    reset_config_cache()
    assert get_model("openai") == "gpt-4"  # nosec B101

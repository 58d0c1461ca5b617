"""
Tests for environment-sourced configuration.
"""

import json

import pytest

from workout_mcp.config import load_settings
from workout_mcp.errors import ConfigError

SERVICE_ACCOUNT = {"type": "service_account", "project_id": "demo"}


def _env(**overrides):
    env = {
        "FIREBASE_SERVICE_ACCOUNT": json.dumps(SERVICE_ACCOUNT),
        "OPENAI_API_KEY": "sk-test",
    }
    env.update(overrides)
    return {k: v for k, v in env.items() if v is not None}


def test_defaults():
    settings = load_settings(_env())

    assert settings.firebase_credentials == SERVICE_ACCOUNT
    assert settings.openai_api_key == "sk-test"
    assert settings.openai_model == "gpt-4"
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.transport == "stdio"
    assert settings.upstream_timeout == 30.0
    assert settings.log_level == "INFO"


def test_overrides():
    settings = load_settings(_env(
        OPENAI_MODEL="gpt-4o-mini",
        PORT="8080",
        HOST="127.0.0.1",
        MCP_TRANSPORT="REST",
        UPSTREAM_TIMEOUT_SECONDS="2.5",
        LOG_LEVEL="debug",
    ))

    assert settings.openai_model == "gpt-4o-mini"
    assert settings.port == 8080
    assert settings.host == "127.0.0.1"
    assert settings.transport == "rest"
    assert settings.upstream_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_secrets_not_in_repr():
    settings = load_settings(_env())
    assert "sk-test" not in repr(settings)


def test_missing_openai_key():
    with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
        load_settings(_env(OPENAI_API_KEY=None))


def test_credentials_from_file(tmp_path):
    path = tmp_path / "sa.json"
    path.write_text(json.dumps(SERVICE_ACCOUNT))

    settings = load_settings(_env(
        FIREBASE_SERVICE_ACCOUNT=None,
        FIREBASE_SERVICE_ACCOUNT_FILE=str(path),
    ))

    assert settings.firebase_credentials == SERVICE_ACCOUNT


def test_missing_credentials_file(tmp_path):
    with pytest.raises(ConfigError, match="Firebase credentials not found"):
        load_settings(_env(
            FIREBASE_SERVICE_ACCOUNT=None,
            FIREBASE_SERVICE_ACCOUNT_FILE=str(tmp_path / "missing.json"),
        ))


def test_unreadable_credentials_file(tmp_path):
    path = tmp_path / "sa.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError, match="Could not read Firebase credentials"):
        load_settings(_env(
            FIREBASE_SERVICE_ACCOUNT=None,
            FIREBASE_SERVICE_ACCOUNT_FILE=str(path),
        ))


def test_inline_credentials_not_json():
    with pytest.raises(ConfigError, match="not valid JSON"):
        load_settings(_env(FIREBASE_SERVICE_ACCOUNT="{oops"))


def test_inline_credentials_not_object():
    with pytest.raises(ConfigError, match="JSON object"):
        load_settings(_env(FIREBASE_SERVICE_ACCOUNT="[1, 2]"))


@pytest.mark.parametrize("key", ["PORT", "UPSTREAM_TIMEOUT_SECONDS"])
def test_non_numeric(key):
    with pytest.raises(ConfigError, match=key):
        load_settings(_env(**{key: "soon"}))


def test_negative_port():
    with pytest.raises(ConfigError, match="negative"):
        load_settings(_env(PORT="-1"))


def test_unknown_transport():
    with pytest.raises(ConfigError, match="MCP_TRANSPORT"):
        load_settings(_env(MCP_TRANSPORT="carrier-pigeon"))


def test_reads_os_environ(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep any real .env out of the picture
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT", json.dumps(SERVICE_ACCOUNT))
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

    settings = load_settings()

    assert settings.openai_api_key == "sk-env"

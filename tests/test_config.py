"""Tests for client configuration loading."""

import pytest
from pydantic import ValidationError

from digicert_client.config import (
    DEFAULT_AUTH_HEADER,
    DEFAULT_BASE_URL,
    ClientConfig,
    config_from_env,
    load_client_config,
)


def test_defaults():
    config = ClientConfig(api_key="k")

    assert config.base_url == DEFAULT_BASE_URL
    assert config.auth_header == DEFAULT_AUTH_HEADER == "X-DC-DEVKEY"
    assert config.timeout_seconds == 30.0
    assert config.raise_on_error is True


def test_rejects_empty_key_and_bad_timeout():
    with pytest.raises(ValidationError):
        ClientConfig(api_key="")
    with pytest.raises(ValidationError):
        ClientConfig(api_key="k", timeout_seconds=0)


def test_load_client_config_from_yaml(tmp_path):
    path = tmp_path / "digicert.yml"
    path.write_text("api_key: abc123\ntimeout_seconds: 5\nraise_on_error: false\n", encoding="utf-8")

    config = load_client_config(path)

    assert config.api_key == "abc123"
    assert config.timeout_seconds == 5.0
    assert config.raise_on_error is False


def test_load_client_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_client_config(tmp_path / "missing.yml")


def test_load_client_config_invalid(tmp_path):
    path = tmp_path / "digicert.yml"
    path.write_text("timeout_seconds: -1\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_client_config(path)


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("DIGICERT_API_KEY", "env-key")
    monkeypatch.setenv("DIGICERT_BASE_URL", "https://sandbox.example.test/v2/")
    monkeypatch.setenv("DIGICERT_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("DIGICERT_RAISE_ON_ERROR", "no")

    config = config_from_env(env_file=tmp_path / "absent.env")

    assert config.api_key == "env-key"
    assert config.base_url == "https://sandbox.example.test/v2/"
    assert config.timeout_seconds == 12.5
    assert config.raise_on_error is False


def test_config_from_env_reads_dotenv_file(monkeypatch, tmp_path):
    monkeypatch.delenv("DIGICERT_API_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("DIGICERT_API_KEY=dotenv-key\n", encoding="utf-8")

    config = config_from_env(env_file=env_file)

    assert config.api_key == "dotenv-key"
    monkeypatch.delenv("DIGICERT_API_KEY", raising=False)

# pylint: disable=missing-module-docstring,missing-function-docstring

import dataclasses

import pytest

from config import AppConfig


_VARS = (
    "ENV", "LOG_LEVEL", "ENABLE_JSON_LOGS", "PICKER_DEFAULT_ENDPOINT",
    "PICKER_AUTO_CONNECT", "WS_PING_INTERVAL_S", "HOST", "PORT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_from_env_defaults(clean_env):
    assert AppConfig.load_from_env() == AppConfig()


def test_load_from_env_reads_overrides(clean_env):
    clean_env.setenv("ENV", "prod")
    clean_env.setenv("LOG_LEVEL", "DEBUG")
    clean_env.setenv("ENABLE_JSON_LOGS", "false")
    clean_env.setenv("PICKER_DEFAULT_ENDPOINT", "wss://sync.example.test")
    clean_env.setenv("PICKER_AUTO_CONNECT", "yes")
    clean_env.setenv("WS_PING_INTERVAL_S", "none")
    clean_env.setenv("HOST", "0.0.0.0")
    clean_env.setenv("PORT", "9001")

    config = AppConfig.load_from_env()

    assert config.env == "prod"
    assert config.log_level == "DEBUG"
    assert config.enable_json_logs is False
    assert config.default_endpoint == "wss://sync.example.test"
    assert config.auto_connect is True
    assert config.ws_ping_interval_s is None
    assert config.host == "0.0.0.0"
    assert config.port == 9001


def test_ping_interval_parses_float(clean_env):
    clean_env.setenv("WS_PING_INTERVAL_S", "2.5")

    assert AppConfig.load_from_env().ws_ping_interval_s == 2.5


def test_bad_port_raises(clean_env):
    clean_env.setenv("PORT", "eighty")

    with pytest.raises(ValueError):
        AppConfig.load_from_env()


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        AppConfig().port = 1  # type: ignore[misc]

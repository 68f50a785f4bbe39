import importlib

import pytest

from spendnote import config


def _reload_clean(monkeypatch) -> None:
    for name in ("DEFAULT_LANGUAGE", "DEFAULT_CURRENCY", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config)


def test_defaults(monkeypatch) -> None:
    try:
        for name in ("DEFAULT_LANGUAGE", "DEFAULT_CURRENCY", "APP_TIMEZONE", "GPT_MODEL", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        importlib.reload(config)

        assert config.DEFAULT_LANGUAGE == "vi"
        assert config.DEFAULT_CURRENCY == "VND"
        assert config.APP_TIMEZONE == "Asia/Ho_Chi_Minh"
        assert config.GPT_MODEL == "gpt-4o-mini"
    finally:
        _reload_clean(monkeypatch)


def test_llm_enabled_follows_api_key(monkeypatch) -> None:
    try:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        importlib.reload(config)
        assert config.LLM_ENABLED is True
    finally:
        _reload_clean(monkeypatch)


def test_values_are_normalized(monkeypatch) -> None:
    try:
        monkeypatch.setenv("DEFAULT_LANGUAGE", " EN ")
        monkeypatch.setenv("DEFAULT_CURRENCY", "usd")
        importlib.reload(config)
        assert config.DEFAULT_LANGUAGE == "en"
        assert config.DEFAULT_CURRENCY == "USD"
    finally:
        _reload_clean(monkeypatch)


def test_invalid_currency_rejected(monkeypatch) -> None:
    try:
        monkeypatch.setenv("DEFAULT_CURRENCY", "EUR")
        with pytest.raises(ValueError, match="DEFAULT_CURRENCY"):
            importlib.reload(config)
    finally:
        _reload_clean(monkeypatch)

"""
Tests for sewstudio/config.py and sewstudio/logging_config.py.
"""

from __future__ import annotations

import json
import logging
import os

import pytest

from sewstudio.config import Settings, get_settings
from sewstudio.logging_config import JSONFormatter, setup_logging

_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEWSTUDIO_OUTPUT_DIR",
    "SEWSTUDIO_CORS_ORIGINS",
    "SEWSTUDIO_LLM_CLASSIFIER",
    "SEWSTUDIO_LLM_MODEL",
    "HOST",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # no stray .env file
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, clean_env):
        settings = get_settings()
        assert settings == Settings()
        assert settings.json_logs is True
        assert settings.llm_classifier is False

    def test_reads_environment(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("LOG_FORMAT", "text")
        clean_env.setenv("SEWSTUDIO_OUTPUT_DIR", "/tmp/packs")
        clean_env.setenv("SEWSTUDIO_CORS_ORIGINS", "https://a.example, https://b.example")
        clean_env.setenv("SEWSTUDIO_LLM_CLASSIFIER", "yes")
        clean_env.setenv("HOST", "127.0.0.1")
        clean_env.setenv("PORT", "9100")
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is False
        assert settings.output_dir == "/tmp/packs"
        assert settings.cors_origins == ("https://a.example", "https://b.example")
        assert settings.llm_classifier is True
        assert settings.host == "127.0.0.1"
        assert settings.port == 9100

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("SEWSTUDIO_LLM_MODEL=claude-from-dotenv\n")
        try:
            assert get_settings().llm_model == "claude-from-dotenv"
        finally:
            os.environ.pop("SEWSTUDIO_LLM_MODEL", None)

    def test_is_cached(self, clean_env):
        assert get_settings() is get_settings()

    def test_is_frozen(self, clean_env):
        with pytest.raises(AttributeError):
            get_settings().log_level = "ERROR"  # type: ignore[misc]


class TestLogging:
    def test_json_formatter_includes_extra_fields(self):
        record = logging.LogRecord(
            name="sewstudio-compositor",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Composed pattern pack %s",
            args=("dress-12-pattern-pack.pdf",),
            exc_info=None,
        )
        record.page_count = 9
        entry = json.loads(JSONFormatter().format(record))
        assert entry["logger"] == "sewstudio-compositor"
        assert entry["level"] == "INFO"
        assert entry["message"] == "Composed pattern pack dress-12-pattern-pack.pdf"
        assert entry["page_count"] == 9
        assert "project_id" not in entry

    def test_setup_logging_installs_one_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug", json_output=False)
            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert not isinstance(root.handlers[0].formatter, JSONFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

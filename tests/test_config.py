"""
Tests for settings and logging configuration
"""
import io
import json
import logging
from pathlib import Path

import pytest

from todo_app.config import (
    Settings,
    get_settings,
    reset_settings,
    setup_logging,
    get_logger,
    request_id_var,
    JSONFormatter,
    ColoredFormatter,
)


ENV_KEYS = ["APP_ENV", "LOG_LEVEL", "LOG_JSON", "LOG_FILE", "API_HOST", "PORT", "API_PORT",
            "CORS_ORIGINS", "HTTPS_REDIRECT"]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield monkeypatch
    reset_settings()


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self, clean_env):
        settings = Settings.from_env()

        assert settings.app_env == "production"
        assert settings.is_development is False
        assert settings.logging.level == "INFO"
        assert settings.logging.json_logs is True
        assert settings.logging.file is None
        assert settings.api.port == 8000
        assert settings.api.cors_origins == ["http://localhost:5135"]
        assert settings.api.https_redirect is False

    def test_development(self, clean_env):
        clean_env.setenv("APP_ENV", "dev")

        settings = Settings.from_env()

        assert settings.is_development is True
        assert settings.logging.level == "DEBUG"
        assert settings.logging.json_logs is False

    def test_overrides(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "warning")
        clean_env.setenv("LOG_FILE", "logs/app.log")
        clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        clean_env.setenv("HTTPS_REDIRECT", "yes")
        clean_env.setenv("API_PORT", "9000")

        settings = Settings.from_env()

        assert settings.logging.level == "WARNING"
        assert settings.logging.file == Path("logs/app.log")
        assert settings.api.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.api.https_redirect is True
        assert settings.api.port == 9000

    @pytest.mark.parametrize("raw, expected", [
        ("verbose", "INFO"),
        ("warn", "INFO"),
        (" error ", "ERROR"),
        ("Critical", "CRITICAL"),
    ])
    def test_log_level_is_normalised(self, clean_env, raw, expected):
        clean_env.setenv("LOG_LEVEL", raw)

        assert Settings.from_env().logging.level == expected

    def test_unknown_log_level_falls_back_to_env_default(self, clean_env):
        clean_env.setenv("APP_ENV", "development")
        clean_env.setenv("LOG_LEVEL", "verbose")

        assert Settings.from_env().logging.level == "DEBUG"

    def test_port_wins_over_api_port(self, clean_env):
        clean_env.setenv("PORT", "7000")
        clean_env.setenv("API_PORT", "9000")

        assert Settings.from_env().api.port == 7000

    def test_bad_port_falls_back(self, clean_env):
        clean_env.setenv("PORT", "eighty")

        assert Settings.from_env().api.port == 8000

    def test_get_settings_is_cached(self, clean_env):
        first = get_settings()
        clean_env.setenv("APP_ENV", "development")

        assert get_settings() is first

        reset_settings()
        assert get_settings().is_development is True


class TestLogging:
    """Tests for logging setup and formatters."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("todo")
        level = logger.level
        handlers = list(logger.handlers)
        yield
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(level)

    def _record(self, msg="hello", **attrs):
        record = logging.LogRecord("todo.test", logging.INFO, __file__, 1, msg, None, None)
        for key, value in attrs.items():
            setattr(record, key, value)
        return record

    def test_json_formatter(self):
        payload = json.loads(JSONFormatter().format(self._record(extra_data={"task": "A"})))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "todo.test"
        assert payload["message"] == "hello"
        assert payload["data"] == {"task": "A"}
        assert "request_id" not in payload

    def test_json_formatter_includes_request_id(self):
        token = request_id_var.set("abc12345")
        try:
            payload = json.loads(JSONFormatter().format(self._record()))
        finally:
            request_id_var.reset(token)

        assert payload["request_id"] == "abc12345"

    def test_colored_formatter_leaves_record_alone(self):
        record = self._record()

        text = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in text
        assert record.levelname == "INFO"

    def test_setup_logging_json_stream(self):
        stream = io.StringIO()
        setup_logging(log_level="INFO", json_logs=True, stream=stream)

        get_logger("test").info("structured", extra={"extra_data": {"n": 1}})

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["message"] == "structured"
        assert payload["logger"] == "todo.test"
        assert payload["data"] == {"n": 1}

    def test_setup_logging_replaces_handlers(self):
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("todo").handlers) == 1

    def test_setup_logging_file(self, tmp_path):
        log_file = tmp_path / "logs" / "todo.log"
        setup_logging(log_level="DEBUG", log_file=str(log_file), stream=io.StringIO())

        get_logger("test").debug("to file")
        for handler in logging.getLogger("todo").handlers:
            handler.flush()

        assert json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])["message"] == "to file"

    def test_get_logger_binds_context(self, caplog):
        caplog.set_level(logging.INFO, logger="todo.bound")
        logger = get_logger("bound", session="s1")

        logger.info("first", extra={"extra_data": {"task": "A"}})

        assert caplog.records[-1].extra_data == {"session": "s1", "task": "A"}

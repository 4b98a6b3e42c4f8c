"""Tests for settings and logging configuration."""

import asyncio
import io
import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from sleeper_mcp.config import Settings, get_logger, setup_logging
from sleeper_mcp.integrations.sleeper_api import SleeperAPIError


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch):
        for key in ("SLEEPER_MCP_BASE_URL", "SLEEPER_MCP_REQUEST_TIMEOUT", "SLEEPER_MCP_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "sleeper-mcp"
        assert settings.app_version == "0.2.0"
        assert settings.base_url == "https://api.sleeper.app/v1"
        assert settings.request_timeout == 5.0
        assert settings.log_format == "console"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SLEEPER_MCP_BASE_URL", "http://localhost:9000/v1")
        monkeypatch.setenv("SLEEPER_MCP_REQUEST_TIMEOUT", "12.5")
        settings = Settings(_env_file=None)
        assert settings.base_url == "http://localhost:9000/v1"
        assert settings.request_timeout == 12.5

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, request_timeout=0)

    def test_rejects_unknown_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestLogging:
    """Tests for setup_logging."""

    def test_json_format(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="DEBUG", log_format="json", stream=stream)
        get_logger("sleeper_mcp.test").info("games_loaded", count=3)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "games_loaded"
        assert record["count"] == 3
        assert record["level"] == "info"
        assert record["logger"] == "sleeper_mcp.test"
        assert "timestamp" in record

    def test_console_format(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="INFO", log_format="console", stream=stream)
        get_logger("sleeper_mcp.test").warning("careful", endpoint="/state/nfl")

        output = stream.getvalue()
        assert "careful" in output
        assert "endpoint=/state/nfl" in output
        assert "sleeper_mcp.test" in output

    def test_level_applied(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="warning", log_format="json", stream=stream)
        get_logger("sleeper_mcp.test").info("hidden")
        assert stream.getvalue() == ""

    def test_module_logger_follows_reconfiguration(self, restore_logging):
        """Loggers created before setup pick up the later configuration."""
        logger = get_logger("sleeper_mcp.test")
        setup_logging(level="INFO", log_format="console", stream=io.StringIO())

        stream = io.StringIO()
        setup_logging(level="INFO", log_format="json", stream=stream)
        logger.info("reconfigured")
        assert json.loads(stream.getvalue())["event"] == "reconfigured"

    def test_stdlib_loggers_share_stream(self, restore_logging):
        stream = io.StringIO()
        setup_logging(level="INFO", log_format="console", stream=stream)
        logging.getLogger("mcp.server").warning("library warning")
        assert "mcp.server - WARNING - library warning" in stream.getvalue()

    def test_client_error_logged(self, restore_logging, sleeper_client, upstream):
        stream = io.StringIO()
        setup_logging(level="INFO", log_format="json", stream=stream)
        upstream.status = 404
        upstream.body = {"message": "Not Found"}

        with pytest.raises(SleeperAPIError):
            asyncio.run(sleeper_client.get("/league/nope"))

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "sleeper_api_error"
        assert record["status"] == 404
        assert record["endpoint"] == "/league/nope"
        assert record["message"] == "Not Found"

"""Tests for structured logging setup."""

import logging

import structlog

from src.observability.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        setup_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_json_renderer_in_production(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        setup_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_json_renderer_on_request(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("LOG_JSON", "true")
        setup_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_in_development(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("LOG_JSON", raising=False)
        setup_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestGetLogger:
    """Tests for get_logger()."""

    def test_logs_with_key_values(self, capsys):
        """Test loggers accept structured key-value pairs."""
        setup_logging(level="INFO")
        logger = get_logger("test")
        logger.info("Lexicon loaded", entries=3)
        captured = capsys.readouterr()
        assert "Lexicon loaded" in captured.err
        assert "entries" in captured.err

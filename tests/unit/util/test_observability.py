"""Unit tests for Logfire and stdlib logging setup."""

import logging

from board.config import Settings
from board.util.logging import QUIET_LOGGERS, setup_logging
from board.util.observability import _should_send


class TestShouldSend:
    """Tests for deciding whether spans leave the process."""

    def test_local_by_default(self, monkeypatch):
        monkeypatch.delenv("OBSERVABILITY__LOGFIRE_TOKEN", raising=False)
        monkeypatch.delenv("OBSERVABILITY__SEND_TO_LOGFIRE", raising=False)

        assert _should_send(Settings()) is False

    def test_token_enables_sending(self, monkeypatch):
        monkeypatch.setenv("OBSERVABILITY__LOGFIRE_TOKEN", "token")
        monkeypatch.delenv("OBSERVABILITY__SEND_TO_LOGFIRE", raising=False)

        assert _should_send(Settings()) is True

    def test_explicit_setting_wins_over_token(self, monkeypatch):
        monkeypatch.setenv("OBSERVABILITY__LOGFIRE_TOKEN", "token")
        monkeypatch.setenv("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

        assert _should_send(Settings()) is False


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiets_library_loggers(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "false")
        root_config = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: root_config.update(kw))

        setup_logging(Settings())

        assert root_config["level"] == logging.INFO
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_debug_echoes_sql(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        root_config = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: root_config.update(kw))

        setup_logging(Settings())

        assert root_config["level"] == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.INFO

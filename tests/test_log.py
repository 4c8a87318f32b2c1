"""Tests for opt-in structlog output of dlit records."""

from __future__ import annotations

import io
import json
import logging

import pytest

import dlit
from dlit.log import LOGGER_NAME, disable_logging, enable_logging


def _ours(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if h.get_name() == "dlit.structlog"]


class TestEnableLogging:
    def test_sets_dlit_level_only(self) -> None:
        root_level = logging.getLogger().level
        enable_logging(level=logging.INFO)
        assert logging.getLogger(LOGGER_NAME).level == logging.INFO
        assert logging.getLogger().level == root_level

    def test_leaves_root_handlers_alone(self) -> None:
        root = logging.getLogger()
        before = root.handlers[:]
        enable_logging()
        assert root.handlers == before

    def test_json_output(self) -> None:
        buf = io.StringIO()
        enable_logging(log_json=True, stream=buf)
        logging.getLogger("dlit.test").warning("json test %d", 42)
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "json test 42"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dlit.test"
        assert "timestamp" in parsed

    def test_rejected_input_logged_at_debug(self) -> None:
        buf = io.StringIO()
        enable_logging(log_json=True, stream=buf)

        dlit.new(1j)

        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "Rejected literal input of kind complex"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "dlit.domain.literal"

    def test_accepted_input_not_logged(self) -> None:
        buf = io.StringIO()
        enable_logging(log_json=True, stream=buf)
        dlit.new(6)
        assert buf.getvalue() == ""

    def test_level_filters_debug(self) -> None:
        buf = io.StringIO()
        enable_logging(level=logging.WARNING, log_json=True, stream=buf)
        dlit.new(1j)
        assert buf.getvalue() == ""

    def test_console_output(self) -> None:
        buf = io.StringIO()
        enable_logging(stream=buf)
        dlit.new(None)
        line = buf.getvalue()
        assert "Rejected literal input of kind NoneType" in line
        assert "\x1b[" not in line

    def test_defaults_to_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        enable_logging(log_json=True)
        dlit.new(b"6")
        captured = capfd.readouterr()
        assert json.loads(captured.err.strip())["event"] == (
            "Rejected literal input of kind bytes"
        )

    def test_idempotent_calls(self) -> None:
        """Repeated calls replace the handler instead of stacking them."""
        enable_logging(log_json=False)
        enable_logging(log_json=True)
        assert len(_ours(logging.getLogger(LOGGER_NAME))) == 1


class TestDisableLogging:
    def test_removes_handler_and_level(self) -> None:
        buf = io.StringIO()
        enable_logging(log_json=True, stream=buf)
        disable_logging()
        logger = logging.getLogger(LOGGER_NAME)
        assert _ours(logger) == []
        assert logger.level == logging.NOTSET
        dlit.new(1j)
        assert buf.getvalue() == ""

    def test_noop_when_not_enabled(self) -> None:
        disable_logging()
        assert _ours(logging.getLogger(LOGGER_NAME)) == []

"""Unit tests for observability logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from sparkpost_transmission.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_default_fields_cover_credentials(self) -> None:
        assert "authorization" in DEFAULT_SENSITIVE_FIELDS
        assert "api_key" in DEFAULT_SENSITIVE_FIELDS

    def test_redact_header_names_case_insensitively(self) -> None:
        redacted = SensitiveFieldsFilter().redact(
            {"Authorization": "key", "Accept": "application/json"}
        )
        assert redacted == {"Authorization": "[REDACTED]", "Accept": "application/json"}

    def test_redact_deep(self) -> None:
        data = {"request": {"headers": {"authorization": "key"}}, "url": "u"}
        redacted = SensitiveFieldsFilter().redact_deep(data)
        assert redacted["request"]["headers"]["authorization"] == "[REDACTED]"
        assert redacted["url"] == "u"
        assert data["request"]["headers"]["authorization"] == "key"

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"Campaign_ID"}))
        assert f.redact({"campaign_id": "c", "authorization": "k"}) == {
            "campaign_id": "[REDACTED]",
            "authorization": "k",
        }


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("sparkpost_transmission.test", base_url="https://x").info("hello", n=1)
        assert len(logs) == 1
        assert logs[0]["event"] == "hello"
        assert logs[0]["n"] == 1
        assert logs[0]["base_url"] == "https://x"
        assert logs[0]["log_level"] == "info"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self) -> Iterator[None]:
        root = logging.getLogger()
        level = root.level
        yield
        structlog.reset_defaults()
        for handler in root.handlers[:]:
            if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
                root.removeHandler(handler)
        root.setLevel(level)

    def test_configures_root_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_emits_redacted_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("sparkpost_transmission.json").info("transmission.request", authorization="key")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "transmission.request"
        assert record["authorization"] == "[REDACTED]"
        assert record["level"] == "info"
        assert "timestamp" in record

"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from typing import Any

import pytest
import structlog

from szuru_client.config.settings import SearchSettings
from szuru_client.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"token": "abc", "query": "tag:cat"})
        assert result["token"] == SensitiveFieldsFilter.REDACTED
        assert result["query"] == "tag:cat"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        result = SensitiveFieldsFilter().redact({f: "value" for f in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        result = SensitiveFieldsFilter().redact({"Authorization": "Token x", "normal": "ok"})
        assert result["Authorization"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"secret_key"}))
        result = f.redact({"secret_key": "abc", "password": "keep"})
        assert result["secret_key"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_nested(self) -> None:
        data: dict[str, Any] = {"user": "alice", "auth": {"password": "hunter2", "user_token": "t"}}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["user"] == "alice"
        assert result["auth"]["password"] == SensitiveFieldsFilter.REDACTED
        assert result["auth"]["user_token"] == SensitiveFieldsFilter.REDACTED

    def test_redact_does_not_modify_original(self) -> None:
        original = {"password": "secret"}
        SensitiveFieldsFilter().redact(original)
        assert original["password"] == "secret"


# ---------------------------------------------------------------------------
# JsonLoggerFactory / get_logger
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_from_settings(self) -> None:
        JsonLoggerFactory.from_settings(SearchSettings(log_level="debug"))
        assert logging.getLogger().level == logging.DEBUG

    def test_redacts_in_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("szuru.test").info("login", password="hunter2", user="alice")
        err = capsys.readouterr().err
        assert "hunter2" not in err
        assert "alice" in err


class TestGetLogger:
    def test_bound_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("szuru.test", resource="posts").info("search_request.built")
        assert logs == [{"event": "search_request.built", "resource": "posts", "log_level": "info"}]

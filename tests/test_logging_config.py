"""Tests for logging setup and API key redaction."""

from __future__ import annotations

import logging
import os

import pytest

from fuel_tools.config.server_config import ServerConfig
from fuel_tools.display.logging_config import (
    BASE_LOG_CFG,
    SecretRedactionFilter,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so other tests see the default logging tree."""
    yield
    for name in ["", *BASE_LOG_CFG["loggers"]]:
        lg = logging.getLogger(name)
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()
        lg.propagate = True
        lg.setLevel(logging.NOTSET if name else logging.WARNING)


def _record(msg: str, args=()) -> logging.LogRecord:
    return logging.LogRecord("fuel_tools", logging.INFO, __file__, 1, msg, args, None)


class TestSecretRedactionFilter:
    def test_no_secrets_passthrough(self) -> None:
        flt = SecretRedactionFilter()
        record = _record("api key %s", ("abcdef",))
        assert flt.filter(record)
        assert record.getMessage() == "api key abcdef"

    def test_message_and_args_redacted(self) -> None:
        flt = SecretRedactionFilter()
        flt.register("s3cr3t-key")
        record = _record("key s3cr3t-key in %s", ("url?k=s3cr3t-key",))
        flt.filter(record)
        assert "s3cr3t-key" not in record.getMessage()
        assert "***REDACTED***" in record.getMessage()

    def test_dict_args_redacted(self) -> None:
        flt = SecretRedactionFilter()
        flt.register("s3cr3t-key")
        record = _record("%(k)s", ())
        record.args = {"k": "s3cr3t-key"}
        flt.filter(record)
        assert record.getMessage() == "***REDACTED***"

    def test_short_values_ignored(self) -> None:
        flt = SecretRedactionFilter()
        flt.register("abc")
        assert flt.redact("abc") == "abc"


class TestSetupLogging:
    def test_invalid_level_falls_back_to_info(self, restore_logging) -> None:
        log_fpath, level = setup_logging("banana", quiet=True)
        assert level == "INFO"
        assert log_fpath is None

    def test_level_applied(self, restore_logging) -> None:
        _, level = setup_logging("debug", quiet=True)
        assert level == "DEBUG"
        assert logging.getLogger("fuel_tools").level == logging.DEBUG

    def test_log_file_created_and_api_keys_redacted(self, tmp_path, restore_logging) -> None:
        servers = [ServerConfig(url="https://myserver", api_key="file-secret-key")]
        log_dir = str(tmp_path / "logs")
        log_fpath, _ = setup_logging(
            "info",
            log_dir=log_dir,
            quiet=True,
            secrets=[s.api_key for s in servers],
        )
        assert log_fpath is not None
        assert os.path.dirname(log_fpath) == log_dir

        logging.getLogger("fuel_tools.config").info("using key %s", "file-secret-key")
        for handler in logging.getLogger("fuel_tools.config").handlers:
            handler.flush()

        with open(log_fpath, encoding="utf-8") as f:
            content = f.read()
        assert "using key ***REDACTED***" in content
        assert "file-secret-key" not in content

    def test_unlisted_values_not_redacted(self, tmp_path, restore_logging) -> None:
        log_fpath, _ = setup_logging(
            "info", log_dir=str(tmp_path), quiet=True, secrets=["listed-secret"]
        )
        ServerConfig(api_key="unlisted-secret")
        logging.getLogger("fuel_tools").info("keys %s %s", "listed-secret", "unlisted-secret")
        for handler in logging.getLogger("fuel_tools").handlers:
            handler.flush()

        with open(log_fpath, encoding="utf-8") as f:
            content = f.read()
        assert "keys ***REDACTED*** unlisted-secret" in content

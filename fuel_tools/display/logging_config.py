"""Logging configuration setup."""

import copy
import logging
import logging.config
import os
import re
import sys
from datetime import datetime
from typing import Iterable, Optional, Set, Tuple  # noqa: UP035

from fuel_tools.constants import DEFAULT_LOG_LEVEL

# ── Secret redaction filter ──────────────────────────────────────────────

_REDACTED = "***REDACTED***"


class SecretRedactionFilter(logging.Filter):
    """Logging filter that replaces registered secret values with a placeholder.

    :func:`setup_logging` builds one per call from the secrets it is given,
    typically the API keys of the configured servers.
    """

    def __init__(self) -> None:
        super().__init__()
        self._secrets: Set[str] = set()
        self._pattern: re.Pattern[str] | None = None

    def register(self, value: str) -> None:
        """Register a secret value for redaction."""
        if value and len(value) >= 4:  # skip trivially short values
            self._secrets.add(value)
            # Longest first so overlapping secrets are fully replaced
            escaped = sorted((re.escape(s) for s in self._secrets), key=len, reverse=True)
            self._pattern = re.compile("|".join(escaped))

    def redact(self, text: str) -> str:
        if self._pattern is None:
            return text
        return self._pattern.sub(_REDACTED, text)

    def filter(self, record: logging.LogRecord) -> bool:
        if self._pattern is not None:
            if isinstance(record.msg, str):
                record.msg = self.redact(record.msg)
            if record.args:
                if isinstance(record.args, dict):
                    record.args = {
                        k: self.redact(v) if isinstance(v, str) else v
                        for k, v in record.args.items()
                    }
                elif isinstance(record.args, tuple):
                    record.args = tuple(
                        self.redact(a) if isinstance(a, str) else a for a in record.args
                    )
        return True


BASE_LOG_CFG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple_console": {
            "format": "%(levelname)-7s %(name)s: %(message)s",
        },
        "simple_file": {
            "format": ("%(asctime)s - %(name)25s:%(lineno)-4d - " "%(levelname)-7s - %(message)s"),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console_handler": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "simple_console",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "fuel_tools": {
            "handlers": ["console_handler"],
            "propagate": False,
            "level": "INFO",
        },
        "fuel_tools.config": {
            "handlers": ["console_handler"],
            "propagate": False,
            "level": "INFO",
        },
    },
    "root": {
        "handlers": ["console_handler"],
        "level": "WARNING",
    },
}

_VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(
    log_lvl_str: str = DEFAULT_LOG_LEVEL,
    *,
    log_dir: Optional[str] = None,
    quiet: bool = False,
    secrets: Iterable[str] = (),
) -> Tuple[Optional[str], str]:
    """
    Set up the logging system.

    Logs go to stderr. When *log_dir* is given, they are also written to a
    timestamped file inside it.

    Args:
        log_lvl_str: The desired log level string (e.g., 'debug', 'info').
        log_dir: Optional directory for a log file (created if missing).
        quiet: If *True*, suppress all ``print()`` output.
        secrets: Values to mask in every log line, e.g. server API keys.

    Returns:
        A tuple of (log_file_path or None, validated_log_level).
    """
    log_lvl_valid = log_lvl_str.upper()
    if log_lvl_valid not in _VALID_LEVELS:
        if not quiet:
            print(f"Warning: invalid log level '{log_lvl_str}'. Using 'INFO'.", file=sys.stderr)
        log_lvl_valid = "INFO"

    redaction_filter = SecretRedactionFilter()
    for secret in secrets:
        redaction_filter.register(secret)

    log_cfg: dict = copy.deepcopy(BASE_LOG_CFG)
    handler_names = ["console_handler"]

    log_fpath: Optional[str] = None
    if log_dir is not None:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        os.makedirs(log_dir, exist_ok=True)
        log_fpath = os.path.join(log_dir, f"fuel_tools_{ts}_{log_lvl_valid}.log")
        log_cfg["handlers"]["file_handler"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "simple_file",
            "filename": log_fpath,
            "encoding": "utf-8",
        }
        handler_names.append("file_handler")

    for logger_cfg in log_cfg["loggers"].values():
        logger_cfg["level"] = log_lvl_valid
        logger_cfg["handlers"] = list(handler_names)
    log_cfg["root"]["handlers"] = list(handler_names)
    log_cfg["root"]["level"] = log_lvl_valid if log_lvl_valid == "DEBUG" else "WARNING"

    try:
        logging.config.dictConfig(log_cfg)
        # Attach the redaction filter to every configured handler
        for name in ["", *log_cfg["loggers"]]:
            for handler in logging.getLogger(name).handlers:
                handler.addFilter(redaction_filter)
        if not quiet:
            print(
                f"Logging initialized. Log level: {log_lvl_valid}, "
                f"log file: {log_fpath or 'none'}",
                file=sys.stderr,
            )
    except (ValueError, TypeError, AttributeError, ImportError) as e_log_cfg:
        if not quiet:
            print(
                f"Error applying logging configuration: {e_log_cfg}",
                file=sys.stderr,
            )

    return log_fpath, log_lvl_valid

"""Configuration file loading and validation.

Reads a YAML configuration file and validates it against the Pydantic
models defined in :mod:`schema`.

The public API is :func:`load_and_validate_config`, which returns the
validated :class:`~fuel_tools.config.schema.FuelConfigFile` or raises a
:class:`~fuel_tools.errors.ConfigurationError` subclass describing the
first problem found.
"""

import logging
import os
from typing import Any, Dict, List, Type

import yaml
from pydantic import ValidationError

from fuel_tools.config.schema import (
    DUPLICATE_SERVER,
    EMPTY_FIELD,
    INVALID_URL,
    FuelConfigFile,
)
from fuel_tools.errors import (
    ConfigIOError,
    ConfigParseError,
    ConfigSchemaError,
    ConfigurationError,
    DuplicateServerError,
    EmptyFieldError,
    InvalidUrlError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)

# Pydantic error type -> exception raised for it. Anything else is a
# structural problem (wrong type for a section or a value).
_ERROR_TYPES: Dict[str, Type[ConfigurationError]] = {
    "missing": MissingFieldError,
    EMPTY_FIELD: EmptyFieldError,
    INVALID_URL: InvalidUrlError,
    DUPLICATE_SERVER: DuplicateServerError,
}


def _read_config_file(cfg_fpath: str) -> Dict[str, Any]:
    """Read and parse the YAML config file at *cfg_fpath*.

    An empty document is returned as an empty mapping.
    """
    try:
        with open(cfg_fpath, "r", encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigIOError(f"Error reading configuration file: {exc}", cfg_fpath) from exc
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"Configuration file is not valid UTF-8:\n  {exc}", cfg_fpath) from exc
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Unable to parse YAML configuration:\n  {exc}", cfg_fpath) from exc

    if raw_data is None:
        return {}
    if not isinstance(raw_data, dict):
        raise ConfigSchemaError(
            "Top-level configuration content must be a YAML mapping (dictionary).",
            cfg_fpath,
        )
    return raw_data


def _format_validation_errors(exc: ValidationError) -> str:
    """Format Pydantic validation errors into a readable multi-line string."""
    lines: List[str] = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"]) or "<root>"
        lines.append(f"  • {loc}: {err['msg']}")
    return "\n".join(lines)


def _to_configuration_error(exc: ValidationError, cfg_fpath: str) -> ConfigurationError:
    """Build the exception matching the first validation error in *exc*."""
    errors = exc.errors()
    first = errors[0]
    message = (
        f"Configuration validation failed ({len(errors)} error(s)):\n"
        f"{_format_validation_errors(exc)}"
    )
    error_cls = _ERROR_TYPES.get(first["type"], ConfigSchemaError)
    if error_cls is DuplicateServerError:
        url = (first.get("ctx") or {}).get("url")
        return DuplicateServerError(message, url=url, cfg_fpath=cfg_fpath)
    return error_cls(message, cfg_fpath)


# ── Public API ───────────────────────────────────────────────────────────


def load_and_validate_config(cfg_fpath: str) -> FuelConfigFile:
    """Load and validate a configuration file.

    Steps:
        1. Read YAML file
        2. Validate against :class:`FuelConfigFile` (Pydantic), which
           normalizes server URLs and rejects duplicates

    Returns:
        The validated configuration. ``servers`` / ``cache`` are ``None``
        when the file does not declare them.

    Raises:
        ConfigIOError: The path is empty, missing or unreadable.
        ConfigParseError: The file is not valid UTF-8 or not valid YAML.
        ConfigSchemaError: A section or value has the wrong type.
        MissingFieldError, EmptyFieldError, InvalidUrlError,
        DuplicateServerError: A server or cache entry is invalid.
    """
    if not cfg_fpath:
        raise ConfigIOError("No configuration file path set.")

    logger.debug("Loading configuration file: %s", cfg_fpath)

    if not os.path.isfile(cfg_fpath):
        raise ConfigIOError("Configuration file does not exist.", cfg_fpath)

    raw_data = _read_config_file(cfg_fpath)

    try:
        config = FuelConfigFile.model_validate(raw_data)
    except ValidationError as exc:
        raise _to_configuration_error(exc, cfg_fpath) from exc

    logger.info(
        "Configuration '%s' loaded. %d server(s), cache section %s.",
        cfg_fpath,
        len(config.servers or []),
        "present" if config.cache is not None else "absent",
    )
    return config

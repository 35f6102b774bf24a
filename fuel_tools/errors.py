"""Custom exception classes for fuel-tools."""

from typing import Optional


class FuelToolsBaseError(Exception):
    """Base class for all custom exceptions in fuel-tools."""

    pass


class ConfigurationError(FuelToolsBaseError):
    """Raised when loading or validating the configuration file fails."""

    def __init__(self, message: str, cfg_fpath: Optional[str] = None):
        self.cfg_fpath = cfg_fpath
        full_msg = message
        if cfg_fpath:
            full_msg = f"{message} (file: {cfg_fpath})"
        super().__init__(full_msg)


class ConfigIOError(ConfigurationError):
    """The configuration file is missing or cannot be read."""

    pass


class ConfigParseError(ConfigurationError):
    """The configuration file is not well-formed YAML."""

    pass


class ConfigSchemaError(ConfigurationError):
    """A section or value of the configuration file has the wrong type."""

    pass


class MissingFieldError(ConfigurationError):
    """A required key (``url`` in a server entry, ``path`` in ``cache``) is absent."""

    pass


class EmptyFieldError(ConfigurationError):
    """A required key is present but its value is empty."""

    pass


class InvalidUrlError(ConfigurationError):
    """A server ``url`` is not an absolute URL with a scheme and a host."""

    pass


class DuplicateServerError(ConfigurationError):
    """
    Raised when two or more server entries normalize to the same URL.
    """

    def __init__(self, message: str, url: Optional[str] = None, cfg_fpath: Optional[str] = None):
        self.url = url
        super().__init__(message, cfg_fpath)

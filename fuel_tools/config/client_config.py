"""Client-side configuration: known servers, cache directory and user agent."""

from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

from fuel_tools.config.loader import load_and_validate_config
from fuel_tools.config.server_config import ServerConfig
from fuel_tools.constants import CACHE_DIR_PARTS, PRODUCT_NAME, PRODUCT_VERSION
from fuel_tools.display.console import pretty_line
from fuel_tools.errors import ConfigurationError

logger = logging.getLogger(__name__)


def _home_path() -> str:
    """Return the user's home directory, or ``""`` if it is not set."""
    var = "HOMEPATH" if sys.platform == "win32" else "HOME"
    return os.environ.get(var, "")


def default_cache_location() -> str:
    """``<home>/.ignition/fuel``."""
    return os.path.join(_home_path(), *CACHE_DIR_PARTS)


class ClientConfig:
    """Configuration of a Fuel client session.

    Holds the ordered list of servers, the local cache directory, the path
    of the configuration file and the user agent sent to servers.
    :meth:`load_config` replaces that state from a YAML file, all or nothing.

    Not thread-safe; use one instance per session or lock externally.
    """

    def __init__(self) -> None:
        self.config_path: str = ""
        self.cache_location: str = default_cache_location()
        self.user_agent: str = f"{PRODUCT_NAME}-{PRODUCT_VERSION}"
        self.last_error: Optional[ConfigurationError] = None
        self._servers: List[ServerConfig] = []

    @property
    def servers(self) -> List[ServerConfig]:
        """Copy of the configured servers, in order."""
        return list(self._servers)

    def add_server(self, server: ServerConfig) -> None:
        """Append *server*. No validation and no duplicate check."""
        self._servers.append(server)

    def load_config(self) -> bool:
        """Load :attr:`config_path` into this configuration.

        Every server entry and the cache section are validated first; the
        servers and the cache location are only replaced once the whole file
        is valid. On failure nothing changes, the error is logged and kept
        in :attr:`last_error`.

        Returns:
            ``True`` if the file was loaded and applied.
        """
        try:
            loaded = load_and_validate_config(self.config_path)
        except ConfigurationError as exc:
            logger.error("Unable to load configuration: %s", exc)
            self.last_error = exc
            return False

        # Everything below is already validated; commit.
        if loaded.servers is not None:
            self._servers = [ServerConfig(url=entry.url) for entry in loaded.servers]
        if loaded.cache is not None:
            self.cache_location = loaded.cache.path
        self.last_error = None

        logger.debug(
            "Configuration applied: %d server(s), cache location '%s'.",
            len(self._servers),
            self.cache_location,
        )
        return True

    def as_string(self, prefix: str = "") -> str:
        out = (
            f"{prefix}Config path: {self.config_path}\n"
            f"{prefix}Cache location: {self.cache_location}\n"
            f"{prefix}Servers:\n"
        )
        for server in self._servers:
            out += f"{prefix}  ---\n"
            out += server.as_string(prefix + "  ")
        return out

    def as_pretty_string(self, prefix: str = "") -> str:
        out = ""
        if self.config_path:
            out += pretty_line("Config path", self.config_path, prefix)
        if self.cache_location:
            out += pretty_line("Cache location", self.cache_location, prefix)
        if self._servers:
            out += f"{prefix}Servers:\n"
            for server in self._servers:
                out += f"{prefix}  ---\n"
                out += server.as_pretty_string(prefix + "  ")
        return out

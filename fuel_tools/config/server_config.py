"""Connection settings for a single Fuel server."""

from __future__ import annotations

import logging

from fuel_tools.config.urls import normalize_url
from fuel_tools.constants import DEFAULT_SERVER_VERSION
from fuel_tools.display.console import pretty_line

logger = logging.getLogger(__name__)


class ServerConfig:
    """Identity and connection info for one remote Fuel server.

    Setting :attr:`url` to something that is not an absolute URL leaves it
    empty rather than raising; check :attr:`url` afterwards to detect it.
    """

    def __init__(
        self,
        url: str = "",
        version: str = DEFAULT_SERVER_VERSION,
        api_key: str = "",
        local_name: str = "",
    ) -> None:
        self._url = ""
        self._version = version
        self._api_key = ""
        self.local_name = local_name
        if url:
            self.url = url
        if api_key:
            self.api_key = api_key

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, raw_url: str) -> None:
        normalized = normalize_url(raw_url)
        if normalized is None:
            logger.debug("Rejected server URL %r: not an absolute URL.", raw_url)
            self._url = ""
        else:
            self._url = normalized

    @property
    def version(self) -> str:
        return self._version

    @version.setter
    def version(self, version: str) -> None:
        self._version = version

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, api_key: str) -> None:
        self._api_key = api_key

    def as_string(self, prefix: str = "") -> str:
        """Plain dump: URL, version and API key, one per line.

        The local name is not part of the dump.
        """
        return (
            f"{prefix}URL: {self._url}\n"
            f"{prefix}Version: {self._version}\n"
            f"{prefix}API key: {self._api_key}\n"
        )

    def as_pretty_string(self, prefix: str = "") -> str:
        """Colorized dump. Empty URL and API key lines are left out."""
        out = ""
        if self._url:
            out += pretty_line("URL", self._url, prefix)
        out += pretty_line("Version", self._version, prefix)
        if self._api_key:
            out += pretty_line("API key", self._api_key, prefix)
        return out

    def __repr__(self) -> str:
        return f"ServerConfig(url={self._url!r}, version={self._version!r})"

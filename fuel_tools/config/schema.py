"""Pydantic models for the fuel-tools configuration file.

The file layout is::

    servers:
      - url: https://api.ignitionfuel.org
    cache:
      path: /tmp/ignition/fuel

Unknown keys are ignored at every level.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from fuel_tools.config.urls import normalize_url

# Custom pydantic error types, mapped onto exceptions by the loader.
EMPTY_FIELD = "empty_field"
INVALID_URL = "invalid_url"
DUPLICATE_SERVER = "duplicate_server"


def _require_non_empty(field_name: str, v: Optional[str]) -> str:
    if v is None or not v.strip():
        raise PydanticCustomError(
            EMPTY_FIELD,
            "field '{field}' must not be empty",
            {"field": field_name},
        )
    return v


class ServerEntry(BaseModel):
    """One item of the ``servers`` list."""

    url: Optional[str] = Field(..., description="Absolute URL of the Fuel server.")

    @field_validator("url")
    @classmethod
    def _normalize_url(cls, v: Optional[str]) -> str:
        v = _require_non_empty("url", v)
        normalized = normalize_url(v)
        if normalized is None:
            raise PydanticCustomError(
                INVALID_URL,
                "URL '{url}' must be absolute, with a scheme and a host",
                {"url": v},
            )
        return normalized


class CacheSection(BaseModel):
    """The ``cache`` section."""

    path: Optional[str] = Field(..., description="Directory where assets are stored.")

    @field_validator("path")
    @classmethod
    def _validate_path(cls, v: Optional[str]) -> str:
        return _require_non_empty("path", v)


class FuelConfigFile(BaseModel):
    """Top-level validated content of a configuration file.

    ``servers`` and ``cache`` are ``None`` when the key is absent from the
    file, so callers can tell "not configured" from "configured empty".
    """

    servers: Optional[List[ServerEntry]] = None
    cache: Optional[CacheSection] = None

    @model_validator(mode="before")
    @classmethod
    def _fill_empty_sections(cls, data: Any) -> Any:
        """Turn bare ``cache:`` and bare ``-`` list items into empty mappings.

        A section that is present but empty must still report its missing
        required keys instead of being treated as absent.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "cache" in data and data["cache"] is None:
            data["cache"] = {}
        servers = data.get("servers")
        if isinstance(servers, list):
            data["servers"] = [{} if item is None else item for item in servers]
        return data

    @model_validator(mode="after")
    def _check_unique_urls(self) -> "FuelConfigFile":
        seen = set()
        for entry in self.servers or []:
            if entry.url in seen:
                raise PydanticCustomError(
                    DUPLICATE_SERVER,
                    "server URL '{url}' is declared more than once",
                    {"url": entry.url},
                )
            seen.add(entry.url)
        return self

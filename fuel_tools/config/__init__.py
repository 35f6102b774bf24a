"""Configuration model and loader for fuel-tools."""

from fuel_tools.config.client_config import ClientConfig, default_cache_location
from fuel_tools.config.loader import load_and_validate_config
from fuel_tools.config.schema import CacheSection, FuelConfigFile, ServerEntry
from fuel_tools.config.server_config import ServerConfig
from fuel_tools.config.urls import normalize_url

__all__ = [
    "CacheSection",
    "ClientConfig",
    "FuelConfigFile",
    "ServerConfig",
    "ServerEntry",
    "default_cache_location",
    "load_and_validate_config",
    "normalize_url",
]

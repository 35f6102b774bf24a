"""
fuel-tools - Client configuration for Ignition Fuel asset servers.

Keeps track of the known Fuel servers, the local asset cache directory and
the user agent, and loads them from a YAML configuration file.
"""

from fuel_tools.config import ClientConfig, ServerConfig
from fuel_tools.constants import PRODUCT_NAME, PRODUCT_VERSION

__version__ = PRODUCT_VERSION
__app_name__ = PRODUCT_NAME

__all__ = [
    "ClientConfig",
    "PRODUCT_NAME",
    "PRODUCT_VERSION",
    "ServerConfig",
    "__version__",
    "__app_name__",
]

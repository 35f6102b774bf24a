"""Shared constants for fuel-tools."""

import os

PRODUCT_NAME = "IgnitionFuelTools"
PRODUCT_VERSION = "1.0.0"

# Server defaults
DEFAULT_SERVER_URL = "https://api.ignitionfuel.org"
DEFAULT_SERVER_VERSION = "1.0"

# Cache location relative to the user's home directory
CACHE_DIR_PARTS = (".ignition", "fuel")

# Initial configuration file shipped with the package
INITIAL_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "config.yaml")

# Logging defaults
DEFAULT_LOG_LEVEL = "INFO"

"""Display helpers: colorized dumps and logging setup."""

from fuel_tools.display.console import disp_client_config, pretty_line
from fuel_tools.display.logging_config import SecretRedactionFilter, setup_logging

__all__ = [
    "SecretRedactionFilter",
    "disp_client_config",
    "pretty_line",
    "setup_logging",
]

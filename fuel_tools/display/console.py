"""Colorized configuration dumps for the console."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from fuel_tools.config.client_config import ClientConfig

# ANSI escapes used by the pretty dumps: bold bright-cyan labels, white values.
PROP_STYLE = "\x1b[96m\x1b[1m"
VALUE_STYLE = "\x1b[37m"
RESET = "\x1b[0m"


def pretty_line(label: str, value: str, prefix: str = "") -> str:
    """Return one colorized ``<label>: <value>`` line, newline included."""
    return f"{prefix}{PROP_STYLE}{label}: {RESET}{VALUE_STYLE}{value}{RESET}\n"


def disp_client_config(config: "ClientConfig", console: Optional[Console] = None) -> None:
    """Print the colorized dump of *config*.

    Rich drops the color codes when the console is not a terminal.
    """
    console = console or Console()
    text = Text.from_ansi(config.as_pretty_string())
    text.rstrip()
    console.print(text)

"""UI components for terminal output and prompts."""

from ferry.ui.output import (
    BLUE,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    echo_command,
    echo_output,
    error,
    hyperlink,
    log,
    printable,
    success,
    warn,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "CYAN",
    "GRAY",
    "MAGENTA",
    "NC",
    # Functions
    "hyperlink",
    "printable",
    "log",
    "success",
    "warn",
    "error",
    "echo_command",
    "echo_output",
]

"""Terminal output helpers with colors and hyperlinks."""

import sys

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
CYAN = "\033[0;36m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
NC = "\033[0m"


def printable(text: str) -> str:
    """Replace surrogate-escaped bytes (non-UTF-8 paths) so the text can be printed."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def hyperlink(url: str, text: str) -> str:
    """OSC 8 hyperlink - clickable in modern terminals."""
    return f"\033]8;;{url}\007{text}\033]8;;\007"


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}[ferry]{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}[ferry]{NC} {msg}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}[ferry]{NC} {msg}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}[ferry] {printable(msg)}{NC}", file=sys.stderr)


def echo_command(command: str) -> None:
    """Print a command before it runs, shell style."""
    print(f"{CYAN}${NC} {printable(command)}")


def echo_output(stdout: str, stderr: str) -> None:
    """Print captured command output: stdout gray, stderr red, then a blank line."""
    if stdout:
        print(f"{GRAY}{printable(stdout.rstrip())}{NC}")
    if stderr:
        print(f"{RED}{printable(stderr.rstrip())}{NC}", file=sys.stderr)
    print()

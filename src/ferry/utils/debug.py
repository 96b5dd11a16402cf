"""Debug logging utilities."""

import json
import time
from pathlib import Path

from ferry.models.state import RunConfig
from ferry.ui.output import GRAY, MAGENTA, NC

DEBUG_LOG = Path.home() / ".config" / "ferry" / "debug.log"


def debug_log(config_or_debug: RunConfig | bool, label: str, data) -> None:
    """Append debug info to log file if debug mode enabled."""
    enabled = config_or_debug.debug if isinstance(config_or_debug, RunConfig) else config_or_debug
    if not enabled:
        return

    DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with open(DEBUG_LOG, "a", encoding="utf-8", errors="surrogateescape") as f:
        f.write(f"\n{'=' * 60}\n")
        f.write(f"[{timestamp}] {label}\n")
        f.write(f"{'=' * 60}\n")
        if isinstance(data, str):
            f.write(data)
        else:
            f.write(json.dumps(data, indent=2))
        f.write("\n")
    print(f"\r\033[K{MAGENTA}[debug]{NC} {label}  {GRAY}-> {DEBUG_LOG}{NC}")

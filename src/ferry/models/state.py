"""Run configuration."""

from dataclasses import dataclass


@dataclass
class RunConfig:
    """CLI arguments bundled together."""

    dry_run: bool = False
    debug: bool = False

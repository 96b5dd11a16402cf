"""CLI entry point and argument parsing."""

import argparse
import re
import sys
from importlib.metadata import version as get_version

import yaml

try:
    __version__ = get_version("ferry")
except Exception:
    __version__ = "dev"

from ferry.config import get_config, get_config_loaded_sources
from ferry.errors import ConfigError, FerryError
from ferry.git.branch import DEFAULT_BRANCH_PATTERN, resolve_context
from ferry.git.status import check_preflight, get_status
from ferry.models.state import RunConfig
from ferry.ui.output import NC, YELLOW, error, log
from ferry.ui.prompts import ask_answers, ask_method
from ferry.utils.debug import DEBUG_LOG, debug_log
from ferry.workflow import run_workflow


def parse_args(argv: list[str] | None = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        prog="ferry",
        description="Move a single commit onto a fresh branch off the default branch, push it "
        "and open a pull request.",
        epilog="""
How it works:
  1. Checks the working tree: nothing may be staged yet
  2. Asks for a method:
     - Last commit: reuse the commit at HEAD
     - Select files: pick changed files and commit them with a message
  3. Asks for a branch type (feature/fixes) and name (lowercase letters and hyphens)
  4. Drops the commit from the current branch (git reset --hard HEAD~1)
  5. Pulls the default branch, creates <type>/<name>, cherry-picks the commit
  6. Pushes the new branch and returns to the original branch
  7. Opens https://github.com/<org>/<repo>/compare/<type>/<name>?expand=1

Config (deep merged, later wins):
  bundled defaults < ~/.config/ferry/config.yaml < .ferry/config.yaml
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Prompt as usual but only print the git commands that would run",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Log every git command and its output to {DEBUG_LOG}",
    )
    args = parser.parse_args(argv)
    return RunConfig(dry_run=args.dry_run, debug=args.debug)


def log_config(config: RunConfig) -> None:
    """Log configuration status."""
    get_config()
    overrides = [s for s in get_config_loaded_sources() if s != "defaults"]
    if overrides:
        log(f"Config overrides: {', '.join(overrides)}")
    if config.debug:
        log(f"Debug logging to {DEBUG_LOG}")
    if config.dry_run:
        log(f"{YELLOW}DRY RUN MODE - no changes will be made{NC}")


def check_branch_pattern(pattern: str) -> str:
    """Fail early on a branch_pattern that is not a valid regex."""
    try:
        re.compile(pattern)
    except (re.error, TypeError) as e:
        raise ConfigError(f"Invalid branch_pattern in config: {pattern!r} ({e})") from e
    return pattern


def run(config: RunConfig) -> str:
    """Preflight, resolve context, prompt, then execute. Returns the compare URL."""
    settings = get_config()
    remote = settings.get("remote", "origin")
    host = settings.get("host", "github.com")
    branch_pattern = check_branch_pattern(settings.get("branch_pattern", DEFAULT_BRANCH_PATTERN))

    entries = get_status()
    debug_log(config, "git status", [e.__dict__ for e in entries])
    check_preflight(entries)

    context = resolve_context(remote, host)
    debug_log(config, "repository context", context.__dict__)

    method = ask_method()
    answers = ask_answers(
        method,
        entries,
        types=settings.get("types"),
        branch_pattern=branch_pattern,
    )

    return run_workflow(
        answers,
        context,
        remote=remote,
        host=host,
        open_browser=settings.get("open_browser", True),
        dry_run=config.dry_run,
        debug=config.debug,
    )


def main() -> None:
    config = parse_args()
    try:
        log_config(config)
        run(config)
    except (FerryError, OSError, yaml.YAMLError) as e:
        error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        error("Interrupted")
        sys.exit(130)
    sys.exit(0)


if __name__ == "__main__":
    main()

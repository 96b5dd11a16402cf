"""Branch lookups and repository context resolution."""

import re
import subprocess

from ferry.errors import GitError
from ferry.git.remote import extract_repo_path, get_default_branch, get_origin_url
from ferry.models.core import RepoContext
from ferry.ui.output import warn

DEFAULT_BRANCH_PATTERN = r"^[a-z-]+$"


def get_current_branch() -> str:
    """Get current git branch name ("" when detached)."""
    result = subprocess.run(
        ["git", "branch", "--show-current"],
        capture_output=True,
        encoding="utf-8",
        errors="surrogateescape",
    )
    if result.returncode != 0:
        raise GitError(f"git branch --show-current failed: {result.stderr.strip()}")
    return result.stdout.strip()


def is_valid_branch_name(name: str, pattern: str = DEFAULT_BRANCH_PATTERN) -> bool:
    """Branch names are lowercase letters and hyphens only."""
    return re.match(pattern, name) is not None


def resolve_context(remote: str = "origin", host: str = "github.com") -> RepoContext:
    """Collect origin URL, repo path, default and current branch."""
    origin_url = get_origin_url(remote)
    repo_path = extract_repo_path(origin_url, host)
    default_branch = get_default_branch(remote)
    if not default_branch:
        warn(f"Could not determine default branch of {remote}")
    current_branch = get_current_branch()
    return RepoContext(
        origin_url=origin_url,
        repo_path=repo_path,
        default_branch=default_branch,
        current_branch=current_branch,
    )

"""Git operations for status, remotes, branches and commits."""

from ferry.git.branch import get_current_branch, is_valid_branch_name, resolve_context
from ferry.git.commit import commit_steps
from ferry.git.remote import (
    extract_repo_path,
    get_default_branch,
    get_origin_url,
    parse_default_branch,
)
from ferry.git.status import check_preflight, get_status, parse_porcelain

__all__ = [
    # Status
    "parse_porcelain",
    "get_status",
    "check_preflight",
    # Remote
    "get_origin_url",
    "extract_repo_path",
    "parse_default_branch",
    "get_default_branch",
    # Branch
    "get_current_branch",
    "is_valid_branch_name",
    "resolve_context",
    # Commit
    "commit_steps",
]

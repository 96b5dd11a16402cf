"""Remote inspection: origin URL, repository path and default branch."""

import subprocess

from ferry.errors import ContextError, GitError

HEAD_BRANCH_PREFIX = "HEAD branch:"


def get_origin_url(remote: str = "origin") -> str:
    """Get the URL configured for a remote."""
    result = subprocess.run(
        ["git", "remote", "get-url", remote],
        capture_output=True,
        encoding="utf-8",
        errors="surrogateescape",
    )
    if result.returncode != 0:
        raise GitError(f"git remote get-url {remote} failed: {result.stderr.strip()}")
    return result.stdout.strip()


def extract_repo_path(url: str, host: str = "github.com") -> str:
    """Extract 'org/repo' from a remote URL.

    e.g., 'https://github.com/org/repo.git' -> 'org/repo'
          'git@github.com:org/repo.git' -> 'org/repo'
    """
    prefixes = (
        f"https://{host}/",
        f"http://{host}/",
        f"ssh://git@{host}/",
        f"git@{host}:",
    )
    for prefix in prefixes:
        if url.startswith(prefix):
            path = url[len(prefix) :]
            break
    else:
        raise ContextError(f"Unexpected remote URL (expected a {host} repository): {url}")

    path = path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    if path.count("/") != 1 or path.startswith("/") or path.endswith("/"):
        raise ContextError(f"Unexpected remote URL (expected <org>/<repo>): {url}")
    return path


def parse_default_branch(output: str) -> str:
    """Pick the default branch out of `git remote show` output.

    Returns "" if no 'HEAD branch:' line is present.
    """
    for line in output.split("\n"):
        text = line.strip()
        if text.startswith(HEAD_BRANCH_PREFIX):
            return text[len(HEAD_BRANCH_PREFIX) :].strip()
    return ""


def get_default_branch(remote: str = "origin") -> str:
    """Ask the remote for its HEAD branch."""
    result = subprocess.run(
        ["git", "remote", "show", remote],
        capture_output=True,
        encoding="utf-8",
        errors="surrogateescape",
    )
    if result.returncode != 0:
        raise GitError(f"git remote show {remote} failed: {result.stderr.strip()}")
    return parse_default_branch(result.stdout)

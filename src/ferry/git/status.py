"""Working tree status parsing and preflight check."""

import subprocess

from ferry.errors import GitError, PreflightError
from ferry.models.core import StatusEntry

# Index codes allowed before ferry starts: unmodified or untracked
ALLOWED_INDEX_CODES = (" ", "?")


def parse_porcelain(raw: str) -> list[StatusEntry]:
    """Parse `git status --porcelain -z` output into status entries.

    Records are NUL-terminated "XY path". Renames and copies are followed by an
    extra record holding the original path.
    """
    records = raw.split("\0")
    entries = []
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if len(record) < 4:
            continue
        x, y, path = record[0], record[1], record[3:]
        orig_path = None
        if x in "RC" or y in "RC":
            if i < len(records):
                orig_path = records[i]
            i += 1
        entries.append(StatusEntry(x=x, y=y, path=path, orig_path=orig_path))
    return entries


def get_status() -> list[StatusEntry]:
    """Read working tree status. Raises GitError if git fails."""
    # -z leaves paths unquoted; undecodable bytes are kept as surrogates for `git add`
    result = subprocess.run(
        ["git", "status", "--porcelain", "-z"],
        capture_output=True,
        encoding="utf-8",
        errors="surrogateescape",
    )
    if result.returncode != 0:
        raise GitError(f"git status failed: {result.stderr.strip()}")
    return parse_porcelain(result.stdout)


def check_preflight(entries: list[StatusEntry]) -> None:
    """Refuse to run if anything is already staged."""
    if any(e.x not in ALLOWED_INDEX_CODES for e in entries):
        raise PreflightError("You are not allowed to have added files")

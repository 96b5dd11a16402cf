"""Core domain models."""

import shlex
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass
class StatusEntry:
    """One record of `git status --porcelain -z`."""

    x: str  # Index status
    y: str  # Work tree status
    path: str
    orig_path: Optional[str] = None  # Source path for renames/copies


class Method(Enum):
    """How the commit to move is obtained."""

    LAST_COMMIT = "Last commit"
    SELECT_FILES = "Select files"


@dataclass
class Answers:
    """Everything collected from the interactive prompts."""

    method: Method
    type: str
    branch: str
    files: list[str] = field(default_factory=list)  # SELECT_FILES only
    message: str = ""  # SELECT_FILES only

    @property
    def full_branch(self) -> str:
        return f"{self.type}/{self.branch}"


@dataclass
class RepoContext:
    """Repository facts resolved before prompting."""

    origin_url: str
    repo_path: str  # "org/repo"
    default_branch: str
    current_branch: str


@dataclass
class Step:
    """A single git command in the workflow."""

    description: str
    args: list[str]

    @property
    def command(self) -> str:
        return shlex.join(self.args)

"""Data models for ferry."""

from ferry.models.core import Answers, Method, RepoContext, StatusEntry, Step
from ferry.models.state import RunConfig

__all__ = [
    # Core
    "StatusEntry",
    "Method",
    "Answers",
    "RepoContext",
    "Step",
    # State
    "RunConfig",
]

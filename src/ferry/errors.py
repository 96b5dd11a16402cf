"""Exceptions raised by ferry. All of them end the run with exit code 1."""


class FerryError(Exception):
    """Base class for errors reported to the user by the CLI."""


class PreflightError(FerryError):
    """Working tree is not in a state ferry can work with."""


class GitError(FerryError):
    """A read-only git query failed."""


class ContextError(FerryError):
    """Repository context could not be resolved from git output."""


class StepError(FerryError):
    """A workflow step failed. Remaining steps are not run."""

    def __init__(self, description: str, stderr: str = ""):
        self.description = description
        self.stderr = stderr.strip()
        msg = f"{description} failed"
        if self.stderr:
            msg += f": {self.stderr}"
        super().__init__(msg)


class AbortedError(FerryError):
    """User quit an interactive prompt."""

    def __init__(self, msg: str = "Aborted"):
        super().__init__(msg)


class ConfigError(FerryError):
    """A config value cannot be used."""

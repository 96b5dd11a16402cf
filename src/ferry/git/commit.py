"""Staging and committing selected files."""

from ferry.models.core import Answers, Method, Step


def commit_steps(answers: Answers) -> list[Step]:
    """Steps that create the commit to move. Empty when reusing the last commit."""
    if answers.method is Method.LAST_COMMIT:
        return []
    return [
        Step("Stage files", ["git", "add", "--", *answers.files]),
        Step("Commit", ["git", "commit", "-m", answers.message]),
    ]

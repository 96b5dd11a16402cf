"""Workflow executor: commit, move it to a fresh branch, push, open compare URL."""

import subprocess
import webbrowser

from ferry.errors import StepError
from ferry.git.commit import commit_steps
from ferry.models.core import Answers, RepoContext, Step
from ferry.ui.output import (
    GRAY,
    NC,
    echo_command,
    echo_output,
    hyperlink,
    log,
    printable,
    success,
)
from ferry.utils.debug import debug_log

CAPTURE_STEP = Step("Capture commit", ["git", "rev-parse", "HEAD"])


def compare_url(host: str, repo_path: str, branch: str) -> str:
    """Pull request comparison URL for a pushed branch."""
    return f"https://{host}/{repo_path}/compare/{branch}?expand=1"


def branch_steps(
    answers: Answers, context: RepoContext, commit: str, remote: str = "origin"
) -> list[Step]:
    """Steps that move `commit` off the current branch onto <type>/<branch>.

    The commit is dropped from the current branch with a hard reset, so it must be
    the only commit to move.
    """
    branch = answers.full_branch
    return [
        Step("Drop commit from current branch", ["git", "reset", "--hard", "HEAD~1"]),
        Step("Fetch", ["git", "fetch"]),
        Step("Switch to default branch", ["git", "checkout", context.default_branch]),
        Step("Pull default branch", ["git", "pull"]),
        Step("Create branch", ["git", "checkout", "-b", branch]),
        Step("Cherry-pick commit", ["git", "cherry-pick", commit]),
        Step("Push branch", ["git", "push", "--set-upstream", remote, branch]),
        Step("Return to original branch", ["git", "checkout", context.current_branch]),
    ]


def run_step(step: Step, debug: bool = False) -> str:
    """Run one step, echoing command and output. Returns stdout.

    Raises StepError naming the step if the command exits non-zero.
    """
    echo_command(step.command)
    result = subprocess.run(
        step.args, capture_output=True, encoding="utf-8", errors="surrogateescape"
    )
    echo_output(result.stdout, result.stderr)
    debug_log(
        debug,
        f"{step.description} (exit {result.returncode})",
        f"$ {step.command}\n{result.stdout}{result.stderr}",
    )
    if result.returncode != 0:
        raise StepError(step.description, result.stderr)
    return result.stdout


def run_steps(steps: list[Step], debug: bool = False) -> None:
    """Run steps in order. The first failure stops the rest."""
    for step in steps:
        run_step(step, debug=debug)


def capture_commit(debug: bool = False) -> str:
    """Hash of HEAD, taken before the hard reset discards it."""
    return run_step(CAPTURE_STEP, debug=debug).strip()


def show_steps(steps: list[Step]) -> None:
    for step in steps:
        print(f"  {step.description:<34}{GRAY}{printable(step.command)}{NC}")


def run_workflow(
    answers: Answers,
    context: RepoContext,
    remote: str = "origin",
    host: str = "github.com",
    open_browser: bool = True,
    dry_run: bool = False,
    debug: bool = False,
) -> str:
    """Run the whole command sequence. Returns the compare URL.

    No rollback: if a step fails the repository is left where that step stopped.
    """
    url = compare_url(host, context.repo_path, answers.full_branch)

    if dry_run:
        log("Dry run, would execute:")
        show_steps(commit_steps(answers) + [CAPTURE_STEP])
        show_steps(branch_steps(answers, context, "HEAD", remote))
        log(f"Would open {url}")
        return url

    print()
    run_steps(commit_steps(answers), debug=debug)
    commit = capture_commit(debug=debug)
    run_steps(branch_steps(answers, context, commit, remote), debug=debug)

    success(f"Pushed {answers.full_branch}: {hyperlink(url, url)}")
    if open_browser:
        webbrowser.open(url)
    return url

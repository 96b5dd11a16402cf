"""Interactive prompts: method choice, branch type/name, files and commit message."""

from typing import Callable, Optional

from ferry.errors import AbortedError
from ferry.git.branch import DEFAULT_BRANCH_PATTERN, is_valid_branch_name
from ferry.models.core import Answers, Method, StatusEntry
from ferry.ui.output import BLUE, GRAY, NC, RED, printable
from ferry.ui.picker import pick_files_curses

DEFAULT_TYPES = ["feature", "fixes"]

# Fields asked in the second batch, per method, in order
FIELDS_BY_METHOD: dict[Method, tuple[str, ...]] = {
    Method.LAST_COMMIT: ("type", "branch"),
    Method.SELECT_FILES: ("files", "type", "branch", "message"),
}

Validator = Callable[[str], Optional[str]]


def is_required(message: str) -> Validator:
    """Validator rejecting empty input with the given message."""

    def _validate(value: str) -> Optional[str]:
        return None if len(value) > 0 else message

    return _validate


def validate_branch_name(value: str, pattern: str = DEFAULT_BRANCH_PATTERN) -> Optional[str]:
    if not value:
        return "You need to specify a branch name."
    if not is_valid_branch_name(value, pattern):
        return "You need to specify small characters."
    return None


validate_message = is_required("You need to specify a commit message.")


def _read(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        print()
        raise AbortedError()


def ask_choice(message: str, choices: list[str]) -> str:
    """Numbered single choice. Enter picks the first option."""
    print(f"{BLUE}?{NC} {message}")
    for i, choice in enumerate(choices, 1):
        print(f"  {i}. {choice}")
    while True:
        answer = _read(f"  Choose 1-{len(choices)} [1]: ").strip()
        if not answer:
            return choices[0]
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        if answer in choices:
            return answer
        print(f"  {RED}Please enter a number between 1 and {len(choices)}.{NC}")


def ask_text(message: str, validate: Validator, prefix: str = "") -> str:
    """Free text input, re-prompted until `validate` returns None."""
    hint = f"{GRAY}{prefix}{NC}" if prefix else ""
    while True:
        value = _read(f"{BLUE}?{NC} {message} {hint}").strip()
        problem = validate(value)
        if problem is None:
            return value
        print(f"  {RED}>> {problem}{NC}")


def ask_method() -> Method:
    label = ask_choice("Method:", [m.value for m in Method])
    return Method(label)


def ask_answers(
    method: Method,
    entries: list[StatusEntry],
    types: Optional[list[str]] = None,
    branch_pattern: str = DEFAULT_BRANCH_PATTERN,
    pick_files: Optional[Callable[[list[StatusEntry]], list[str]]] = None,
) -> Answers:
    """Ask the method-specific fields from FIELDS_BY_METHOD."""
    types = types or DEFAULT_TYPES
    pick_files = pick_files or pick_files_curses
    values: dict = {}

    for name in FIELDS_BY_METHOD[method]:
        if name == "files":
            values["files"] = pick_files(entries)
            print(f"{BLUE}?{NC} Files to commit: {printable(', '.join(values['files']))}")
        elif name == "type":
            values["type"] = ask_choice("Type:", types)
        elif name == "branch":
            values["branch"] = ask_text(
                "Branch name:",
                lambda v: validate_branch_name(v, branch_pattern),
                prefix=f"{values['type']}/",
            )
        elif name == "message":
            values["message"] = ask_text("Commit message:", validate_message)
        else:
            raise ValueError(f"Unknown prompt field: {name}")

    return Answers(method=method, **values)

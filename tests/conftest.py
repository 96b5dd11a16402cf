"""Shared test fixtures."""

import subprocess

import pytest

from ferry.models.core import Answers, Method, RepoContext, StatusEntry


@pytest.fixture
def sample_entries():
    return [
        StatusEntry(x=" ", y="M", path="src/app.py"),
        StatusEntry(x="?", y="?", path="notes.md"),
        StatusEntry(x=" ", y="D", path="old.txt"),
    ]


@pytest.fixture
def sample_context():
    return RepoContext(
        origin_url="https://github.com/org/repo.git",
        repo_path="org/repo",
        default_branch="main",
        current_branch="wip",
    )


@pytest.fixture
def last_commit_answers():
    return Answers(method=Method.LAST_COMMIT, type="fixes", branch="my-fix")


@pytest.fixture
def select_files_answers():
    return Answers(
        method=Method.SELECT_FILES,
        type="feature",
        branch="new-thing",
        files=["src/app.py", "notes.md"],
        message="Add new thing",
    )


@pytest.fixture
def reset_config_cache():
    import ferry.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock


@pytest.fixture
def mock_input(mocker):
    """Feed scripted answers to input()."""

    def _feed(*answers):
        return mocker.patch("builtins.input", side_effect=list(answers))

    return _feed

import logging
import shutil
import subprocess
from pathlib import Path

import pytest


def run_git(args, cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        text=True,
        capture_output=True,
        check=True,
    )


@pytest.fixture
def git_repo(tmp_path):
    """An empty Git repository on branch ``main`` with a committer identity.

    Tests using this fixture are skipped when git is not installed.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    repo = tmp_path / "repo"
    repo.mkdir()
    run_git(["init", "-q"], cwd=repo)
    run_git(["symbolic-ref", "HEAD", "refs/heads/main"], cwd=repo)
    run_git(["config", "user.name", "vuku"], cwd=repo)
    run_git(["config", "user.email", "vuku@example.com"], cwd=repo)
    run_git(["config", "commit.gpgsign", "false"], cwd=repo)
    return repo


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by ``logging.basicConfig`` in the CLI.

    CliRunner swaps the standard streams per invocation, so a handler left
    on the root logger would write to a closed stream in later tests.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)

"""GitClient against a real temporary repository."""

import subprocess
from pathlib import Path

import pytest

from vuku.vcs.git_client import GitClient, GitError


def _git(args, cwd: Path) -> str:
    return subprocess.run(
        ["git", *args], cwd=str(cwd), text=True, capture_output=True, check=True
    ).stdout


def _commit_file(repo: Path, name: str, content: str = "one\n") -> None:
    (repo / name).write_text(content, encoding="utf-8")
    _git(["add", name], cwd=repo)
    _git(["commit", "-q", "-m", f"add {name}"], cwd=repo)


def test_status_snapshot(git_repo):
    _commit_file(git_repo, "tracked.txt")
    (git_repo / "tracked.txt").write_text("two\n", encoding="utf-8")
    (git_repo / "new.txt").write_text("new\n", encoding="utf-8")
    (git_repo / "sub").mkdir()
    (git_repo / "sub" / "nested.txt").write_text("nested\n", encoding="utf-8")
    (git_repo / "staged.txt").write_text("staged\n", encoding="utf-8")
    _git(["add", "staged.txt"], cwd=git_repo)

    client = GitClient(git_repo)

    assert client.get_unstaged_files() == {"tracked.txt", "new.txt", "sub/nested.txt"}
    assert client.get_staged_files() == {"staged.txt"}
    assert client.get_current_branch() == "main"


def test_stage_and_unstage(git_repo):
    _commit_file(git_repo, "tracked.txt")
    (git_repo / "tracked.txt").write_text("two\n", encoding="utf-8")
    (git_repo / "new.txt").write_text("new\n", encoding="utf-8")
    client = GitClient(git_repo)

    client.stage_files(["new.txt", "tracked.txt"])
    assert client.get_staged_files() == {"new.txt", "tracked.txt"}
    assert client.get_unstaged_files() == set()

    client.stage_files(["new.txt"])
    assert client.get_staged_files() == {"new.txt", "tracked.txt"}

    client.unstage_files(["tracked.txt"])
    assert client.get_staged_files() == {"new.txt"}
    assert client.get_unstaged_files() == {"tracked.txt"}
    assert (git_repo / "tracked.txt").read_text(encoding="utf-8") == "two\n"


def test_stage_deleted_file(git_repo):
    _commit_file(git_repo, "tracked.txt")
    (git_repo / "tracked.txt").unlink()
    client = GitClient(git_repo)

    assert client.get_unstaged_files() == {"tracked.txt"}
    client.stage_files(["tracked.txt"])
    assert client.get_staged_files() == {"tracked.txt"}
    assert client.get_unstaged_files() == set()


def test_unstage_before_first_commit(git_repo):
    (git_repo / "first.txt").write_text("x\n", encoding="utf-8")
    client = GitClient(git_repo)
    client.stage_all_files()
    assert client.get_staged_files() == {"first.txt"}

    client.unstage_files(["first.txt"])

    assert client.get_staged_files() == set()
    assert client.get_unstaged_files() == {"first.txt"}


def test_create_branch_and_commit(git_repo):
    _commit_file(git_repo, "tracked.txt")
    client = GitClient(git_repo)

    client.create_branch("feature/add-thing")
    assert client.get_current_branch() == "feature/add-thing"
    with pytest.raises(GitError):
        client.create_branch("feature/add-thing")

    (git_repo / "tracked.txt").write_text("two\n", encoding="utf-8")
    client.stage_all_files()
    message = "✨ feat(core): add thing\n\nLonger body\n\nCloses #1"
    client.commit(message)

    assert _git(["log", "-1", "--format=%B"], cwd=git_repo).strip() == message


def test_commit_with_empty_index_fails(git_repo):
    _commit_file(git_repo, "tracked.txt")
    with pytest.raises(GitError):
        GitClient(git_repo).commit("chore: nothing")


def test_publish_and_push(git_repo, tmp_path):
    remote = tmp_path / "remote.git"
    _git(["init", "-q", "--bare", str(remote)], cwd=tmp_path)
    _git(["remote", "add", "origin", str(remote)], cwd=git_repo)
    _commit_file(git_repo, "tracked.txt")
    client = GitClient(git_repo)
    client.create_branch("feature/push-me")

    assert client.is_branch_published("feature/push-me") is False
    client.push("feature/push-me", is_published=False)
    assert client.is_branch_published("feature/push-me") is True
    upstream = _git(["rev-parse", "--abbrev-ref", "@{u}"], cwd=git_repo).strip()
    assert upstream == "origin/feature/push-me"

    _commit_file(git_repo, "second.txt")
    client.push("feature/push-me", is_published=True)
    local = _git(["rev-parse", "HEAD"], cwd=git_repo).strip()
    pushed = _git(["rev-parse", "feature/push-me"], cwd=remote).strip()
    assert pushed == local


def test_not_published_without_remote(git_repo):
    _commit_file(git_repo, "tracked.txt")
    assert GitClient(git_repo).is_branch_published("main") is False

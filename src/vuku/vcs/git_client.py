"""
Git client implementation for vuku.

This module wraps the handful of Git operations the commit workflow
needs: reading the current branch and the working tree status, staging
and unstaging files, creating a branch, committing and pushing. Every
call shells out to the ``git`` executable through :meth:`GitClient._run`
so that unit tests can mock a single seam.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Set


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class FileStatus:
    """A path reported by ``git status`` and whether the entry is staged.

    A file with both staged and unstaged modifications is reported twice,
    once for each side.
    """

    path: str
    staged: bool


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for interacting with a Git repository."""

    remote = "origin"

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached. ``.git`` may be a file for worktrees and
        submodules.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If git cannot be started, or if the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.error("Could not run git: %s", e)
            raise GitError(f"Could not run git: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    def _has_head(self) -> bool:
        """Return True once the current branch has at least one commit."""
        result = self._run(["rev-parse", "--verify", "--quiet", "HEAD"], check=False)
        return result.returncode == 0

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------
    def get_file_statuses(self) -> List[FileStatus]:
        """Return a fresh snapshot of changed files.

        Parses ``git status --porcelain -z``. The first status column
        describes the index, the second the working tree. Untracked files
        (``??``) are reported as unstaged. For renames and copies the
        entry is followed by the original path, which is skipped.

        Raises
        ------
        GitError
            If the status command fails.
        """
        result = self._run(
            ["status", "--porcelain", "-z", "--untracked-files=all"], check=True
        )
        statuses: List[FileStatus] = []
        entries = result.stdout.split("\0")
        index = 0
        while index < len(entries):
            entry = entries[index]
            index += 1
            if len(entry) < 4:
                continue
            index_state, tree_state, path = entry[0], entry[1], entry[3:]
            if index_state in "RC" or tree_state in "RC":
                index += 1  # original path of the rename/copy
            if index_state == "?":
                statuses.append(FileStatus(path=path, staged=False))
                continue
            if index_state != " ":
                statuses.append(FileStatus(path=path, staged=True))
            if tree_state != " ":
                statuses.append(FileStatus(path=path, staged=False))
        return statuses

    def get_unstaged_files(self) -> Set[str]:
        """Paths with working tree changes not yet in the index."""
        return {status.path for status in self.get_file_statuses() if not status.staged}

    def get_staged_files(self) -> Set[str]:
        """Paths with changes recorded in the index."""
        return {status.path for status in self.get_file_statuses() if status.staged}

    # ------------------------------------------------------------------
    # Branch operations
    # ------------------------------------------------------------------
    def get_current_branch(self) -> str:
        """Get the name of the current branch.

        Returns ``"HEAD"`` when the repository is in detached HEAD state.

        Raises
        ------
        GitError
            If unable to determine the current branch.
        """
        result = self._run(["branch", "--show-current"], check=True)
        return result.stdout.strip() or "HEAD"

    def create_branch(self, branch_name: str) -> None:
        """Create and switch to a new branch.

        Raises
        ------
        GitError
            If the branch already exists or the name is rejected by git.
        """
        self._run(["checkout", "-b", branch_name], check=True)
        logger.info("Created and switched to branch %s", branch_name)

    def is_branch_published(self, branch_name: str) -> bool:
        """Return True if ``branch_name`` exists on the remote.

        Any failure (no remote, no network) is treated as "not published".
        """
        try:
            result = self._run(
                ["ls-remote", "--heads", self.remote, f"refs/heads/{branch_name}"], check=False
            )
        except GitError as exc:
            logger.debug("Could not query remote branches: %s", exc)
            return False
        return result.returncode == 0 and bool(result.stdout.strip())

    # ------------------------------------------------------------------
    # Staging, committing, pushing
    # ------------------------------------------------------------------
    def stage_files(self, files: Iterable[str]) -> None:
        """Stage the given files for commit.

        Files still on disk are added with a single ``git add``; files that
        no longer exist are removed from the index with ``git rm``.
        Staging an already staged file has no effect.
        """
        present: List[str] = []
        missing: List[str] = []
        for file in sorted(set(files)):
            if (self.repo_root / file).exists():
                present.append(file)
            else:
                missing.append(file)
        if present:
            self._run(["add", "--"] + present, check=True)
        if missing:
            self._run(
                ["rm", "--cached", "--quiet", "--ignore-unmatch", "--"] + missing,
                check=True,
            )

    def unstage_files(self, files: Iterable[str]) -> None:
        """Remove the given files from the index, keeping working tree changes.

        On a branch without commits there is no HEAD to restore from, so
        the entries are dropped from the index instead.
        """
        paths = sorted(set(files))
        if not paths:
            return
        if self._has_head():
            self._run(["restore", "--staged", "--"] + paths, check=True)
        else:
            self._run(
                ["rm", "--cached", "-r", "--quiet", "--ignore-unmatch", "--"] + paths,
                check=True,
            )

    def stage_all_files(self) -> None:
        """Stage every change in the working tree, including untracked files."""
        self._run(["add", "-A"], check=True)

    def commit(self, message: str) -> None:
        """Create a commit with the given message.

        Multi-line commit messages are supported. If the index is empty
        or a hook rejects the commit, a GitError is raised.
        """
        self._run(["commit", "-m", message], check=True)

    def push(self, branch_name: str, is_published: bool) -> None:
        """Push ``branch_name`` to the remote.

        Parameters
        ----------
        branch_name : str
            The branch to push.
        is_published : bool
            When False the upstream is set with ``--set-upstream`` so that
            later plain pushes and pulls track the new remote branch.

        Raises
        ------
        GitError
            If pushing fails.
        """
        if is_published:
            self._run(["push", self.remote, branch_name], check=True)
        else:
            self._run(["push", "--set-upstream", self.remote, branch_name], check=True)

"""
The interactive branch-and-commit workflow.

:class:`PromptOrchestrator` walks the user through a fixed sequence of
decisions: whether to create a branch, which files to stage, what the
commit message should say, and whether to push. Each decision point is
visited at most once per run. Points where the user chooses to stop
raise :class:`WorkflowCancelled`, which the CLI turns into a clean exit.
Git failures propagate as :class:`~vuku.vcs.git_client.GitError`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Collection, Iterable, Optional, Set, Tuple

import click

from vuku.config.options import ProgramOptions
from vuku.console import (
    print_info,
    print_message_preview,
    print_section,
    print_success,
    print_warning,
)
from vuku.formatting.commit_model import BranchAnswers, BranchType, CommitAnswers, CommitType
from vuku.formatting.formatter import Formatter
from vuku.interaction.prompter import Prompter
from vuku.vcs.git_client import GitClient


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


BRANCH_NAME_RE = re.compile(r"^[A-Za-z0-9\-_/]+$")

STAGE_ALL = "all"
STAGE_SELECT = "select"
STAGE_CANCEL = "cancel"


class WorkflowCancelled(Exception):
    """Raised when the user stops the workflow. Not an error."""

    pass


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of a completed run."""

    branch: str
    message: str
    branch_created: bool
    pushed: bool


def validate_branch_name(name: str) -> None:
    """Reject branch names outside ``[A-Za-z0-9-_/]``.

    Raises
    ------
    click.BadParameter
        So that the prompt asks again.
    """
    if not name:
        raise click.BadParameter("Branch name is required")
    if not BRANCH_NAME_RE.match(name):
        raise click.BadParameter(
            "Branch name can only contain letters, numbers, hyphens, "
            "underscores, and forward slashes"
        )


def reconcile_staging(
    unstaged: Collection[str], staged: Collection[str], toggled: Iterable[str]
) -> Tuple[Set[str], Set[str]]:
    """Work out which files to stage and unstage from a multi-select answer.

    Every toggled file flips state. A fully staged file is unstaged; a file
    with unstaged changes, including a partially staged one, is staged as
    a whole.

    Returns
    -------
    Tuple[Set[str], Set[str]]
        ``(to_stage, to_unstage)``.
    """
    toggled_set = set(toggled)
    unstaged_set = set(unstaged)
    fully_staged = set(staged) - unstaged_set
    return toggled_set & unstaged_set, toggled_set & fully_staged


class PromptOrchestrator:
    """Run the interactive workflow once.

    Parameters
    ----------
    git : GitClient
        Adapter for the repository being committed to.
    prompter : Prompter
        Source of user answers.
    formatter : Formatter
        Builds branch names and commit messages.
    options : ProgramOptions
        Options parsed from the command line.
    """

    def __init__(
        self,
        git: GitClient,
        prompter: Prompter,
        formatter: Formatter,
        options: ProgramOptions,
    ) -> None:
        self.git = git
        self.prompter = prompter
        self.formatter = formatter
        self.options = options

    def run(self) -> WorkflowResult:
        """Execute the full workflow.

        Raises
        ------
        WorkflowCancelled
            When the user stops at one of the decision points or there is
            nothing to commit.
        GitError
            When a git operation fails.
        """
        print_section("🌿 Branch")
        current_branch, protected = self.determine_branch_context()
        branch_created = False
        if self.decide_branch_creation(current_branch, protected):
            details = self.collect_branch_details()
            self.create_branch(details)
            branch_created = True

        print_section("📄 Files")
        self.reconcile_files()

        print_section("💬 Commit message")
        answers = self.collect_commit_details()
        message = self.commit(answers)

        print_section("🚀 Push")
        branch = self.git.get_current_branch()
        pushed = self.decide_push(branch)
        return WorkflowResult(
            branch=branch,
            message=message,
            branch_created=branch_created,
            pushed=pushed,
        )

    # ------------------------------------------------------------------
    # Branch handling
    # ------------------------------------------------------------------
    def determine_branch_context(self) -> Tuple[str, bool]:
        """Return the current branch and whether it is protected."""
        branch = self.git.get_current_branch()
        protected = self.options.is_protected(branch)
        logger.debug("Current branch %s (protected=%s)", branch, protected)
        print_info(f"Current branch: {click.style(branch, fg='cyan', bold=True)}")
        return branch, protected

    def decide_branch_creation(self, current_branch: str, protected: bool) -> bool:
        """Ask whether to create a branch.

        On a protected branch creating a branch is the default, and
        declining requires a second confirmation before committing there
        directly.
        """
        if not protected:
            return self.prompter.confirm(
                "Would you like to create a new branch?", default=False
            )

        print_warning(f"You are currently on the {current_branch} branch.")
        print_warning("It is recommended to create a new branch for your changes.")
        if self.prompter.confirm("Would you like to create a new branch?", default=True):
            return True
        if not self.prompter.confirm(
            click.style(
                f"Are you sure you want to commit directly to {current_branch}?",
                fg="red",
            ),
            default=False,
        ):
            raise WorkflowCancelled("Operation cancelled")
        return False

    def collect_branch_details(self) -> BranchAnswers:
        branch_type = self.prompter.select(
            "Select the type of branch:",
            [(member.label, member.value) for member in BranchType],
        )
        branch_name = self.prompter.text(
            "Enter a name for your branch",
            required=True,
            validate=validate_branch_name,
        )
        return BranchAnswers(branch_type=branch_type, branch_name=branch_name)

    def create_branch(self, details: BranchAnswers) -> str:
        name = self.formatter.format_branch_name(details.branch_type, details.branch_name)
        self.git.create_branch(name)
        print_success(f"Created and switched to branch {name}")
        return name

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------
    def reconcile_files(self) -> Set[str]:
        """Make sure the index holds what the user wants to commit.

        Returns the staged paths once reconciliation is done.

        Raises
        ------
        WorkflowCancelled
            If nothing is modified, the user cancels, or nothing ends up
            staged.
        """
        unstaged = self.git.get_unstaged_files()
        staged = self.git.get_staged_files()

        if not unstaged and not staged:
            print_warning("No files to commit. Please add or modify files first.")
            raise WorkflowCancelled("Nothing to commit")

        if not unstaged:
            print_info(f"{len(staged)} file(s) already staged")
            return staged

        action = self.prompter.select(
            "You have unstaged files. What would you like to do?",
            [
                ("Select individual files to stage", STAGE_SELECT),
                ("Stage all files", STAGE_ALL),
                ("Cancel", STAGE_CANCEL),
            ],
        )
        if action == STAGE_CANCEL:
            raise WorkflowCancelled("Operation cancelled")

        if action == STAGE_ALL:
            self.git.stage_all_files()
            print_success("All files have been staged")
        else:
            self._select_files(unstaged, staged)

        final_staged = self.git.get_staged_files()
        if not final_staged:
            print_warning("No files staged.")
            raise WorkflowCancelled("Nothing staged")
        print_success(f"{len(final_staged)} file(s) staged")
        return final_staged

    def _select_files(self, unstaged: Set[str], staged: Set[str]) -> None:
        candidates = sorted(unstaged | staged)
        toggled = self.prompter.checkbox(
            "Select files to stage ([x] = staged):",
            [(path, path) for path in candidates],
            checked=staged - unstaged,
        )
        to_stage, to_unstage = reconcile_staging(unstaged, staged, toggled)
        logger.debug("Staging %s, unstaging %s", sorted(to_stage), sorted(to_unstage))
        if to_stage:
            self.git.stage_files(sorted(to_stage))
        if to_unstage:
            self.git.unstage_files(sorted(to_unstage))

    # ------------------------------------------------------------------
    # Commit and push
    # ------------------------------------------------------------------
    def collect_commit_details(self) -> CommitAnswers:
        """Ask for the commit fields; scope, body and footer only in detailed mode."""
        commit_type = self.prompter.select(
            "Select the type of change:",
            [(member.label, member.value) for member in CommitType],
        )
        scope: Optional[str] = None
        if self.options.detailed:
            scope = self.prompter.text("Enter a scope (optional)")
        description = self.prompter.text("Enter a description", required=True)
        has_breaking = self.prompter.confirm(
            "Does this change contain breaking changes?", default=False
        )
        body: Optional[str] = None
        footer: Optional[str] = None
        if self.options.detailed:
            body = self.prompter.text("Enter a longer description (optional)")
            footer = self.prompter.text("Enter any footer notes (optional)")
        return CommitAnswers(
            type=commit_type,
            description=description,
            has_breaking=has_breaking,
            scope=scope,
            body=body,
            footer=footer,
        )

    def commit(self, answers: CommitAnswers) -> str:
        """Preview the message, then commit once the user agrees."""
        message = self.formatter.format_commit_message(answers)
        click.echo("\nCommit message preview:")
        print_message_preview(message)
        if not self.prompter.confirm("Proceed with commit?", default=True):
            raise WorkflowCancelled("Commit cancelled")
        self.git.commit(message)
        print_success("Successfully created commit")
        return message

    def decide_push(self, branch: str) -> bool:
        if not self.prompter.confirm(
            f"Would you like to push your changes to {self.git.remote}/{branch}?",
            default=True,
        ):
            print_info("Skipping push")
            return False
        published = self.git.is_branch_published(branch)
        self.git.push(branch, published)
        print_success(f"Successfully pushed to {self.git.remote}/{branch}")
        return True

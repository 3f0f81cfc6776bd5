"""
Command line interface for vuku.

This module defines the ``main`` click command used as the entry point
of the ``vuku`` executable. It parses the flags, locates the Git
repository, wires the formatter, git client and prompts together and
runs the workflow once. Exit code 0 means the commit was made or the
user stopped the workflow; 1 means something failed.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from vuku import __version__
from vuku.config.options import ProgramOptions
from vuku.console import print_banner, print_error, print_info
from vuku.formatting.formatter import Formatter
from vuku.interaction.orchestrator import PromptOrchestrator, WorkflowCancelled
from vuku.interaction.prompter import Prompter
from vuku.vcs.git_client import GitClient, GitError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

EPILOG = """\b
Example usage:
  $ vuku
  $ vuku --skip-emoji
  $ vuku --detailed

\b
The tool will guide you through:
1. Creating a new branch (optional)
2. Staging the files to commit
3. Creating a conventional commit message with:
   - Type of change (feat, fix, docs, etc.)
   - Description
   - Breaking changes indicator
   When using --detailed:
   - Scope, extended description and footer notes (optional)
4. Pushing the branch (optional)
"""


def build_orchestrator(repo_root: Path, options: ProgramOptions) -> PromptOrchestrator:
    """Create the workflow and its collaborators for ``repo_root``."""
    formatter = Formatter(skip_emoji=options.skip_emoji, breaking_note=options.breaking_note)
    return PromptOrchestrator(GitClient(repo_root), Prompter(), formatter, options)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.option("-s", "--skip-emoji", is_flag=True, help="Skip adding emojis to commit messages.")
@click.option("-d", "--detailed", is_flag=True, help="Show additional optional fields during commit.")
@click.option(
    "--no-breaking-note",
    is_flag=True,
    help="Only mark breaking changes with '!' and leave out the BREAKING CHANGE paragraph.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(__version__, "-V", "--version", prog_name="vuku")
def main(skip_emoji: bool, detailed: bool, no_breaking_note: bool, verbose: bool) -> None:
    """Interactive git branch and commit message generator following
    conventional commits."""
    # force=True so repeated invocations (tests) reconfigure handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    options = ProgramOptions.from_flags(
        skip_emoji=skip_emoji,
        detailed=detailed,
        no_breaking_note=no_breaking_note,
        verbose=verbose,
    )
    logger.debug("Options: %s", options)

    print_banner("📝 Conventional Commit Assistant")

    try:
        repo_root = GitClient.find_repo_root(Path.cwd())
        if repo_root is None:
            print_error("Current directory is not inside a Git repository.")
            raise click.exceptions.Exit(EXIT_FAILURE)

        result = build_orchestrator(repo_root, options).run()

        pushed = " and pushed" if result.pushed else ""
        click.echo(f"\n🎉 Committed to {result.branch}{pushed}.\n")
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except WorkflowCancelled as exc:
        print_info(str(exc))
        raise click.exceptions.Exit(EXIT_SUCCESS)
    except GitError as exc:
        print_error(f"Git error: {exc}")
        raise click.exceptions.Exit(EXIT_FAILURE)
    except (click.exceptions.Exit, click.exceptions.Abort):
        # Click handles its own exit and abort exceptions
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_FAILURE)


if __name__ == "__main__":
    main(prog_name="vuku")

"""
Version control integration.

vuku works with Git only. :class:`GitClient` exposes the branch,
status, staging, commit and push operations used by the interactive
workflow.
"""

from .git_client import FileStatus, GitClient, GitError  # noqa: F401

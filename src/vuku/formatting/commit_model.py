"""
Data models for conventional commits and branches.

:class:`CommitType` and :class:`BranchType` are the closed sets of
choices offered to the user. :class:`CommitAnswers` and
:class:`BranchAnswers` hold what was collected during a single run and
are handed to the formatter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class CommitType(str, Enum):
    """Conventional Commit change types."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"

    @property
    def emoji(self) -> str:
        return EMOJI_MAP[self.value]

    @property
    def description(self) -> str:
        return _COMMIT_DESCRIPTIONS[self.value]

    @property
    def label(self) -> str:
        """Menu label, e.g. ``"✨ feat: A new feature"``."""
        return f"{self.emoji} {self.value}: {self.description}"


class BranchType(str, Enum):
    """Branch name prefixes offered when creating a branch."""

    FEATURE = "feature"
    BUGFIX = "bugfix"
    HOTFIX = "hotfix"
    RELEASE = "release"
    SUPPORT = "support"

    @property
    def label(self) -> str:
        return f"{self.value} - {_BRANCH_DESCRIPTIONS[self.value]}"


# Keyed by plain strings so lookups also work for types outside the enum.
EMOJI_MAP: Dict[str, str] = {
    "feat": "✨",
    "fix": "🐛",
    "docs": "📚",
    "style": "💎",
    "refactor": "♻️",
    "perf": "⚡️",
    "test": "🧪",
    "build": "🏗️",
    "ci": "👷",
    "chore": "🔧",
    "revert": "⏪",
}

_COMMIT_DESCRIPTIONS: Dict[str, str] = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "perf": "A code change that improves performance",
    "test": "Adding missing tests or correcting existing tests",
    "build": "Changes that affect the build system or external dependencies",
    "ci": "Changes to CI configuration files and scripts",
    "chore": "Other changes that don't modify src or test files",
    "revert": "Reverts a previous commit",
}

_BRANCH_DESCRIPTIONS: Dict[str, str] = {
    "feature": "For new features",
    "bugfix": "For bug fixes",
    "hotfix": "For urgent fixes",
    "release": "For release branches",
    "support": "For support branches",
}


@dataclass(frozen=True)
class CommitAnswers:
    """Answers collected for one commit.

    Attributes
    ----------
    type : str
        The Conventional Commit type (``feat``, ``fix``, ...).
    description : str
        Short, non-empty summary used in the header line.
    has_breaking : bool
        Whether the change is marked as breaking.
    scope : Optional[str]
        Optional scope, only asked for in detailed mode.
    body : Optional[str]
        Optional extended description, only asked for in detailed mode.
    footer : Optional[str]
        Optional footer notes, only asked for in detailed mode.
    """

    type: str
    description: str
    has_breaking: bool = False
    scope: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None


@dataclass(frozen=True)
class BranchAnswers:
    """Branch type and raw name entered by the user."""

    branch_type: str
    branch_name: str

"""
Run-time options for vuku.

vuku reads no configuration file and no environment variables. All
options come from command line flags and are parsed once into an
immutable :class:`ProgramOptions` value that is passed explicitly to
the formatter and the orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


DEFAULT_PROTECTED_BRANCHES: Tuple[str, ...] = ("main", "master")


@dataclass(frozen=True)
class ProgramOptions:
    """Immutable options for a single invocation.

    Attributes
    ----------
    skip_emoji : bool
        Leave the type glyph out of the commit header.
    detailed : bool
        Also ask for scope, body and footer.
    breaking_note : bool
        Append a ``BREAKING CHANGE:`` paragraph for breaking commits.
    verbose : bool
        Enable debug logging.
    protected_branches : Tuple[str, ...]
        Branches on which direct commits need an explicit confirmation.
    """

    skip_emoji: bool = False
    detailed: bool = False
    breaking_note: bool = True
    verbose: bool = False
    protected_branches: Tuple[str, ...] = DEFAULT_PROTECTED_BRANCHES

    @classmethod
    def from_flags(
        cls,
        skip_emoji: bool = False,
        detailed: bool = False,
        no_breaking_note: bool = False,
        verbose: bool = False,
        protected_branches: Iterable[str] = DEFAULT_PROTECTED_BRANCHES,
    ) -> "ProgramOptions":
        """Build options from the raw command line flag values."""
        return cls(
            skip_emoji=bool(skip_emoji),
            detailed=bool(detailed),
            breaking_note=not no_breaking_note,
            verbose=bool(verbose),
            protected_branches=tuple(protected_branches),
        )

    def is_protected(self, branch: str) -> bool:
        return branch in self.protected_branches

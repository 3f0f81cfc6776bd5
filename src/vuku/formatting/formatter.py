"""
Commit message and branch name formatting.

The :class:`Formatter` turns collected answers into the final strings
handed to git. It has no side effects, so the same answers always
produce the same message.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Union

from vuku.formatting.commit_model import EMOJI_MAP, CommitAnswers

BREAKING_CHANGE_NOTE = "BREAKING CHANGE: This commit introduces breaking changes."

_WHITESPACE_RE = re.compile(r"\s+")


def _plain(value: Union[str, Enum]) -> str:
    # str-mixin enums render as "Class.MEMBER" in f-strings on newer Pythons
    return value.value if isinstance(value, Enum) else value


class Formatter:
    """Format commit messages and branch names.

    Parameters
    ----------
    skip_emoji : bool
        Omit the type glyph from the header line.
    breaking_note : bool
        Append a ``BREAKING CHANGE:`` paragraph when the breaking flag is
        set. When disabled only the ``!`` marker is written.
    """

    def __init__(self, skip_emoji: bool = False, breaking_note: bool = True) -> None:
        self.skip_emoji = skip_emoji
        self.breaking_note = breaking_note

    def format_header(self, answers: CommitAnswers) -> str:
        commit_type = _plain(answers.type)
        emoji = "" if self.skip_emoji else EMOJI_MAP.get(commit_type, "")
        prefix = f"{emoji} " if emoji else ""
        scope = f"({answers.scope})" if answers.scope else ""
        breaking = "!" if answers.has_breaking else ""
        return f"{prefix}{commit_type}{scope}{breaking}: {answers.description}"

    def format_commit_message(self, answers: CommitAnswers) -> str:
        """Build the full commit message.

        Optional sections are separated by a blank line and left out
        entirely when empty::

            [<emoji> ]<type>[(<scope>)][!]: <description>

            [<body>]

            [BREAKING CHANGE: ...]

            [<footer>]
        """
        sections = [self.format_header(answers)]
        if answers.body:
            sections.append(answers.body)
        if answers.has_breaking and self.breaking_note:
            sections.append(BREAKING_CHANGE_NOTE)
        if answers.footer:
            sections.append(answers.footer)
        return "\n\n".join(sections)

    @staticmethod
    def format_branch_name(branch_type: Union[str, Enum], branch_name: str) -> str:
        """Return ``"<type>/<name>"`` with the name lower-cased and
        whitespace runs replaced by single hyphens."""
        normalized = _WHITESPACE_RE.sub("-", branch_name.strip().lower())
        return f"{_plain(branch_type)}/{normalized}"

"""
Interactive prompts built on click.

:class:`Prompter` offers the four kinds of questions the workflow asks:
yes/no confirmations, a choice from a numbered menu, free text and a
multi-select list. Invalid answers are handled by click itself, which
prints the error and asks again, so callers only ever see valid values.
"""

from __future__ import annotations

import re
from typing import Callable, Collection, List, Optional, Sequence, Tuple, TypeVar

import click

T = TypeVar("T")

Choice = Tuple[str, T]

_SEPARATOR_RE = re.compile(r"[,\s]+")


def parse_toggle_selection(raw: str, count: int) -> List[int]:
    """Parse a multi-select answer into zero-based item indexes.

    Accepts item numbers separated by commas or whitespace and inclusive
    ranges such as ``2-4``. A blank answer selects nothing. Duplicates
    are dropped, first occurrence wins.

    Raises
    ------
    click.BadParameter
        If a token is not a number or range within ``1..count``.
    """
    selected: List[int] = []
    for token in _SEPARATOR_RE.split(raw.strip()):
        if not token:
            continue
        start_text, _, end_text = token.partition("-")
        try:
            start = int(start_text)
            end = int(end_text) if end_text else start
        except ValueError:
            raise click.BadParameter(f"'{token}' is not a number or range")
        if start > end or start < 1 or end > count:
            raise click.BadParameter(f"'{token}' is not between 1 and {count}")
        for number in range(start, end + 1):
            if number - 1 not in selected:
                selected.append(number - 1)
    return selected


class Prompter:
    """Ask the user questions on the terminal."""

    def confirm(self, message: str, default: bool = False) -> bool:
        return click.confirm(message, default=default)

    def select(self, message: str, choices: Sequence[Choice], default: int = 0) -> T:
        """Show a numbered menu and return the value of the chosen entry.

        ``default`` is the zero-based index picked when the answer is left
        empty.
        """
        click.echo(message)
        for number, (label, _value) in enumerate(choices, start=1):
            click.echo(f"  {number:>2}) {label}")
        picked = click.prompt(
            "   Enter a number",
            type=click.IntRange(1, len(choices)),
            default=default + 1,
        )
        return choices[picked - 1][1]

    def text(
        self,
        message: str,
        required: bool = False,
        validate: Optional[Callable[[str], None]] = None,
    ) -> str:
        """Ask for free text.

        Surrounding whitespace is stripped. Optional answers may be left
        empty and come back as ``""``. ``validate`` may raise
        :class:`click.BadParameter` to reject an answer.
        """

        def process(raw: str) -> str:
            value = raw.strip()
            if required and not value:
                raise click.BadParameter("A value is required")
            if validate is not None and value:
                validate(value)
            return value

        return click.prompt(
            message,
            default=None if required else "",
            show_default=False,
            value_proc=process,
        )

    def checkbox(
        self,
        message: str,
        choices: Sequence[Choice],
        checked: Collection[T] = (),
    ) -> List[T]:
        """Show a list with check marks and return the values the user toggled.

        Entries whose value is in ``checked`` are shown as ``[x]``. The
        answer lists the numbers to flip; a blank answer flips nothing.
        """
        click.echo(message)
        for number, (label, value) in enumerate(choices, start=1):
            mark = "x" if value in checked else " "
            click.echo(f"  {number:>2}) [{mark}] {label}")
        indexes = click.prompt(
            "   Numbers to toggle (e.g. 1,3 or 2-4; blank keeps the marks)",
            default="",
            show_default=False,
            value_proc=lambda raw: parse_toggle_selection(raw, len(choices)),
        )
        return [choices[index][1] for index in indexes]

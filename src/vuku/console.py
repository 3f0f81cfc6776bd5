"""
Terminal output helpers.

All user-facing status lines go through these functions so that the
prefix glyphs stay consistent. Errors are written to stderr.
"""

from __future__ import annotations

import textwrap
from typing import List

import click


def print_banner(title: str, width: int = 60) -> None:
    click.echo("\n" + "=" * width)
    click.echo(title.center(width))
    click.echo("=" * width)


def print_section(title: str, width: int = 60) -> None:
    """Print a section divider with a title."""
    click.echo(f"\n{'─' * width}")
    click.echo(title)
    click.echo("─" * width)


def print_info(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {click.style(message, fg='green')}")


def print_warning(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {click.style(message, fg='yellow')}")


def print_error(message: str, indent: int = 0) -> None:
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {click.style(message, fg='red')}", err=True)


def print_message_preview(message: str, width: int = 56) -> None:
    """Show a commit message inside a box. Long lines are wrapped."""
    inner = width - 2
    lines: List[str] = []
    for line in message.splitlines() or [""]:
        lines.extend(
            textwrap.wrap(line, inner, break_long_words=True, break_on_hyphens=False) or [""]
        )
    click.echo("   ┌" + "─" * width + "┐")
    for line in lines:
        click.echo(f"   │ {line.ljust(inner)} │")
    click.echo("   └" + "─" * width + "┘")

"""
Configuration for vuku.

Options are taken from the command line only; see
:mod:`vuku.config.options`.
"""

from .options import DEFAULT_PROTECTED_BRANCHES, ProgramOptions  # noqa: F401

"""
Conventional commit models and formatting.

See :mod:`vuku.formatting.formatter` for the message layout and
:mod:`vuku.formatting.commit_model` for the commit and branch types.
"""

from .commit_model import BranchAnswers, BranchType, CommitAnswers, CommitType  # noqa: F401
from .formatter import Formatter  # noqa: F401

"""
Top-level package for vuku.

The command line entry point lives in :mod:`vuku.cli`; the building
blocks it wires together are the formatter (:mod:`vuku.formatting`),
the git adapter (:mod:`vuku.vcs`) and the interactive workflow
(:mod:`vuku.interaction`).
"""

__all__ = ["__version__"]

__version__ = "1.0.0"

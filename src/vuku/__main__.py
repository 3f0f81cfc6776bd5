"""
Allow ``python -m vuku`` as an alternative to the ``vuku`` console
script installed via ``pyproject.toml``.
"""

from vuku.cli import main


if __name__ == "__main__":
    main(prog_name="vuku")

"""Skillsearch CLI.

Built with Click and Rich.
"""

from skillsearch.cli.main import cli

__all__ = ["cli"]

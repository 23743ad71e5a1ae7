"""objkit command-line interface."""

from objkit.cli.main import cli

__all__ = ["cli"]

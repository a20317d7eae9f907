"""Command line interface for catalogkit."""

from catalogkit.cli.main import app, run


__all__ = ["app", "run"]

"""Shared helpers used across CLI command modules."""

from __future__ import annotations
from typing import NoReturn
import typer
from catalogkit.cli.state import CLIContext


def get_context(ctx: typer.Context) -> CLIContext:
    """Return the CLI context stored on the Typer context object."""
    obj = ctx.obj
    if not isinstance(obj, CLIContext):
        msg = "CLI context has not been initialised"
        raise RuntimeError(msg)
    return obj


def abort_with_error(context: CLIContext, exc: Exception) -> NoReturn:
    """Print an error and exit the CLI with a non-zero status code."""
    context.console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


__all__ = ["abort_with_error", "get_context"]

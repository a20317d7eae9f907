"""Commands demonstrating ordered sequence operations."""

from __future__ import annotations
import typer
from catalogkit.cli.render import render_sequence, render_table
from catalogkit.cli.utils import abort_with_error, get_context
from catalogkit.errors import IndexOutOfRangeError
from catalogkit.generators import bounded_sequence, is_odd
from catalogkit.samples import default_galaxies, default_numbers, default_salmon
from catalogkit.sequences import (
    append,
    remove_by_index,
    remove_by_value,
    remove_where,
)


def list_galaxies(ctx: typer.Context) -> None:
    """Display the galaxies in declaration order."""
    context = get_context(ctx)
    rows = [
        (galaxy.name, str(galaxy.mega_light_years)) for galaxy in default_galaxies()
    ]
    render_table(
        context.console,
        title="Galaxies",
        columns=("Name", "Mega Light Years"),
        rows=rows,
    )


def salmon(ctx: typer.Context) -> None:
    """Remove ``coho`` from the salmon list and append it again."""
    context = get_context(ctx)
    species = default_salmon()
    render_sequence(context.console, species, label="initial")
    remove_by_value(species, "coho")
    render_sequence(context.console, species, label="removed")
    append(species, "coho")
    render_sequence(context.console, species, label="appended")


def numbers(ctx: typer.Context) -> None:
    """Remove the odd values from the numbers 0 through 9."""
    context = get_context(ctx)
    values = default_numbers()
    render_sequence(context.console, values, label="initial")
    remove_where(values, is_odd)
    render_sequence(context.console, values, label="evens")


def evens(
    ctx: typer.Context,
    first: int = typer.Option(5, "--first", help="Inclusive lower bound."),
    last: int = typer.Option(18, "--last", help="Inclusive upper bound."),
) -> None:
    """Print the even numbers between two bounds."""
    context = get_context(ctx)
    render_sequence(context.console, list(bounded_sequence(first, last)))


def remove_at(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Zero-based index to remove."),
) -> None:
    """Remove a salmon species by position."""
    context = get_context(ctx)
    species = default_salmon()
    try:
        removed = remove_by_index(species, index)
    except IndexOutOfRangeError as exc:
        abort_with_error(context, exc)
    context.console.print(f"removed: {removed}")
    render_sequence(context.console, species, label="remaining")


__all__ = ["evens", "list_galaxies", "numbers", "remove_at", "salmon"]

"""Element catalog commands."""

from __future__ import annotations
import logging
import typer
from catalogkit.catalog import lookup_many, query_by_max_rank
from catalogkit.cli.render import render_table
from catalogkit.cli.utils import get_context
from catalogkit.samples import LOOKUP_SYMBOLS, build_default_catalog


logger = logging.getLogger(__name__)


def list_elements(ctx: typer.Context) -> None:
    """Display every element in the sample catalog."""
    context = get_context(ctx)
    catalog = build_default_catalog(policy=context.settings.duplicate_policy)
    rows = [
        (code, element.name, str(element.atomic_number))
        for code, element in catalog.items()
    ]
    render_table(
        context.console,
        title="Elements",
        columns=("Symbol", "Name", "Atomic Number"),
        rows=rows,
    )


def lookup_elements(
    ctx: typer.Context,
    symbols: list[str] | None = typer.Argument(
        None, help="Symbols to look up. Defaults to K Na Ca Cl Sc Ti."
    ),
) -> None:
    """Report which symbols are present in the sample catalog."""
    context = get_context(ctx)
    catalog = build_default_catalog(policy=context.settings.duplicate_policy)
    requested = symbols or list(LOOKUP_SYMBOLS)
    results = lookup_many(catalog, requested)
    for result in results:
        if result.element is None:
            context.console.print(f"{result.code} not found")
        else:
            context.console.print(f"found: {result.element.name}")
    missing = sum(1 for result in results if not result.found)
    logger.info(
        "Looked up %d symbols, %d missing",
        len(results),
        missing,
        extra={"event": "catalog_lookup", "missing": missing},
    )


def query_elements(
    ctx: typer.Context,
    max_rank: int | None = typer.Option(
        None,
        "--max-rank",
        help="Only include elements whose atomic number is below this value.",
    ),
) -> None:
    """List elements below an atomic number, ordered by name."""
    context = get_context(ctx)
    catalog = build_default_catalog(policy=context.settings.duplicate_policy)
    bound = context.settings.query_max_rank if max_rank is None else max_rank
    rows = [
        (element.name, str(element.atomic_number))
        for element in query_by_max_rank(catalog, bound)
    ]
    if not rows:
        context.console.print("[yellow]No elements found.[/yellow]")
        return
    render_table(
        context.console,
        title=f"Elements with atomic number < {bound}",
        columns=("Name", "Atomic Number"),
        rows=rows,
    )


__all__ = ["list_elements", "lookup_elements", "query_elements"]

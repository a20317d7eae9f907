"""Rendering helpers for CLI output."""

from __future__ import annotations
from collections.abc import Iterable, Sequence
from typing import Any
from rich.console import Console
from rich.table import Table
from catalogkit.sequences import for_each


def render_table(
    console: Console,
    *,
    title: str,
    columns: Sequence[str],
    rows: Iterable[Sequence[str]],
) -> None:
    """Render a simple table using :mod:`rich`."""
    table = Table(title=title, show_lines=False)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    console.print(table)


def render_sequence(
    console: Console,
    values: list[Any],
    *,
    label: str | None = None,
) -> None:
    """Print ``values`` on one line, separated by spaces."""
    parts: list[str] = []
    for_each(values, lambda value: parts.append(str(value)))
    line = " ".join(parts)
    if label:
        console.print(f"[bold]{label}:[/bold] {line}")
    else:
        console.print(line)

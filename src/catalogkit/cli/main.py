"""catalogkit CLI entrypoint."""

from __future__ import annotations
import sys
from typing import Annotated
import click
import typer
from rich.console import Console
from catalogkit.cli import elements, lists
from catalogkit.cli.state import CLIContext
from catalogkit.config import get_settings
from catalogkit.logging_config import configure_from_settings


_USAGE_ERRORS: tuple[type[Exception], ...] = (click.UsageError,)
try:
    from typer._click.exceptions import UsageError as _TyperUsageError
except ModuleNotFoundError:  # click-backed typer releases
    pass
else:
    _USAGE_ERRORS = (click.UsageError, _TyperUsageError)


app = typer.Typer(help="Explore the sample element catalog and sequence helpers.")

app.command("elements")(elements.list_elements)
app.command("lookup")(elements.lookup_elements)
app.command("query")(elements.query_elements)
app.command("galaxies")(lists.list_galaxies)
app.command("salmon")(lists.salmon)
app.command("numbers")(lists.numbers)
app.command("evens")(lists.evens)
app.command("remove-at")(lists.remove_at)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured log level."),
    ] = None,
) -> None:
    """Load settings, configure logging and share state with commands."""
    console = Console()
    try:
        settings = get_settings(refresh=True)
        configure_from_settings(log_level)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    ctx.obj = CLIContext(settings=settings, console=console)


def run() -> None:
    """Entry point used by console scripts."""
    console = Console()
    try:
        exit_code = app(standalone_mode=False)
    except _USAGE_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc.message}")
        if exc.ctx and exc.ctx.command_path:
            help_cmd = f"{exc.ctx.command_path} --help"
            console.print(f"\nRun '[cyan]{help_cmd}[/cyan]' for usage information.")
        sys.exit(1)
    if isinstance(exit_code, int) and exit_code:
        sys.exit(exit_code)


__all__ = ["app", "main", "run"]

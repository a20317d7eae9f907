"""Runtime state shared across CLI commands."""

from __future__ import annotations
from dataclasses import dataclass
from dynaconf import Dynaconf
from rich.console import Console


@dataclass(slots=True)
class CLIContext:
    """Object stored on :class:`typer.Context` for command access."""

    settings: Dynaconf
    console: Console

"""Doctor command for environment diagnostics."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_settings() -> tuple[AppSettings | None, str]:
    try:
        return AppSettings(), "OK"
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        return None, f"invalid: {fields}"


def _interactive(stream: TextIO) -> str:
    try:
        return "OK" if stream.isatty() else "WARN"
    except (AttributeError, ValueError):
        return "WARN"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings, detail = _check_settings()

    table = Table(title="Data-Frobotz Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Settings", "OK" if settings else "FAIL", detail)
    if settings is not None:
        table.add_row("Site name", "OK", settings.site_name)
        table.add_row("Exit sentinel", "OK", settings.exit_sentinel)
        table.add_row("Banner", "OK", "shown" if settings.show_banner else "hidden")
        table.add_row("Log level", "OK", settings.log_level)
        table.add_row("Log file", "OK", str(settings.log_file) if settings.log_file else "console only")

    # Prompts block on line reads; a pipe works but nothing is echoed back.
    for name, stream in (("stdin", sys.stdin), ("stdout", sys.stdout)):
        status = _interactive(stream)
        table.add_row(name, status, "interactive" if status == "OK" else "not a TTY")

    _console.print(table)

    if settings is None:
        _console.print("\n[yellow]Note:[/yellow] fix the FROBOTZ_* variables listed above, see `doctor paths`.")
        raise typer.Exit(code=1)


@app.command()
def paths() -> None:
    """Show the .env files that are read; later files override earlier ones."""

    table = Table(title="Configuration files")
    table.add_column("File", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")

    for env_path in (Path(".env"), get_user_env_file()):
        table.add_row(str(env_path), "found" if env_path.is_file() else "missing")

    _console.print(table)

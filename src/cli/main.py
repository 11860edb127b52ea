"""Data-Frobotz command line.

Without a sub-command the splash screen is shown and the menu answer picks
the flow; `login`, `subscribe` and `unsubscribe` jump straight to a flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.terminal import RichTerminal
from cli import doctor
from cli.ui_components import (
    build_menu_panel,
    build_subscriber_notice,
    build_subscriber_result,
    build_subscription_notice,
    build_subscription_result,
    flow_heading,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import MenuOption
from core.errors import InputClosedError
from core.logger import configure_logging, get_logger
from core.services.registration import collect_subscriber_info, collect_subscription_data

app = typer.Typer(
    help="Data-Frobotz: log in, subscribe or unsubscribe from the console.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

logger = get_logger(__name__)


@dataclass
class CliState:
    """Per-invocation objects shared by the commands."""

    settings: AppSettings
    console: Console
    terminal: RichTerminal


def _state(ctx: typer.Context) -> CliState:
    return ctx.find_root().obj


def _run_flow(state: CliState, option: MenuOption) -> None:
    settings = state.settings
    console = state.console
    console.print(flow_heading(option, settings.site_name))

    if option is MenuOption.SUBSCRIBE:
        console.print(build_subscription_notice())
        data = collect_subscription_data(state.terminal, exit_sentinel=settings.exit_sentinel)
        console.print(build_subscription_result(data), soft_wrap=True)
        return

    console.print(build_subscriber_notice(settings.exit_sentinel))
    info = collect_subscriber_info(state.terminal, exit_sentinel=settings.exit_sentinel)
    console.print(build_subscriber_result(info), soft_wrap=True)


def _guarded(state: CliState, action: Callable[[], None]) -> None:
    """Run `action`, turning a closed input stream into exit code 1."""

    try:
        action()
    except InputClosedError as exc:
        typer.echo(f"\nInput closed: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _show_splash(state: CliState) -> None:
    console = state.console
    if state.settings.show_banner:
        print_banner(console, state.settings.site_name)
    console.print(build_menu_panel())

    response = state.terminal.read_line("Option: ")
    option = MenuOption.from_response(response)
    if option is None:
        logger.info("Unrecognized menu option %r", response.strip())
        console.print(f"[yellow]Unrecognized option:[/yellow] {escape(repr(response.strip()))}")
        return
    _run_flow(state, option)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Show the splash menu when no command is given."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        if ctx.invoked_subcommand == "doctor":
            # doctor reports the invalid settings itself.
            return
        typer.echo(f"Invalid configuration:\n{exc}", err=True)
        raise typer.Exit(code=2) from exc

    configure_logging(settings)
    console = Console(highlight=False)
    state = CliState(settings=settings, console=console, terminal=RichTerminal(console))
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        _guarded(state, lambda: _show_splash(state))


@app.command()
def login(ctx: typer.Context) -> None:
    """Enter the subscription id to log in."""

    state = _state(ctx)
    _guarded(state, lambda: _run_flow(state, MenuOption.LOGIN))


@app.command()
def subscribe(ctx: typer.Context) -> None:
    """Subscribe with an email address and/or an SMS phone number."""

    state = _state(ctx)
    _guarded(state, lambda: _run_flow(state, MenuOption.SUBSCRIBE))


@app.command()
def unsubscribe(ctx: typer.Context) -> None:
    """Enter the subscription id to unsubscribe."""

    state = _state(ctx)
    _guarded(state, lambda: _run_flow(state, MenuOption.UNSUBSCRIBE))


def run() -> None:
    app()

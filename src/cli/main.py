"""CLI principal (Typer).

Por qué aquí vive el manejo de errores:
- El Core devuelve resultados tipados (`FetchOutcome`); esta capa decide qué
  se imprime, qué es fatal y con qué código de salida termina el proceso.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from adapters.anu_qrng import AnuQrngSource
from cli import doctor
from cli.prompts import resolve_request_parameters, select_option
from cli.ui_components import (
    print_banner,
    print_lotto_result,
    print_outcome_error,
    print_random_array,
)
from core.config import AppSettings
from core.domain.models import MAX_LENGTH, MIN_LENGTH, DataType
from core.errors import QrngError, UpstreamHTTPError
from core.logs import configure_logging
from core.services.qrng_pipeline import PipelineHooks, run_lotto, run_random_array

app = typer.Typer(
    name="qrng-cli",
    help="Fetches quantum random numbers from ANU QRNG API.",
    add_completion=False,
)
app.command(name="doctor")(doctor.run)

_console = Console()
_err_console = Console(stderr=True)

MENU_LOTTO = "Lotto"
MENU_RANDOM_ARRAY = "Random Array"


@dataclass
class CliState:
    settings: AppSettings
    pause: bool


def _announce_intention(_delay: float) -> None:
    _console.print("[bold green]Focus on your intention...[/bold green]")


def _wait_for_exit(state: CliState) -> None:
    if not state.pause:
        return
    _console.print("Press Enter to exit...")
    try:
        _console.input()
    except (EOFError, KeyboardInterrupt):
        # Sin stdin (pipe cerrado) equivale a pulsar Enter.
        return


def _execute(state: CliState, action: Callable[[], None]) -> None:
    """Ejecuta un flujo completo y aplica la política de errores fatales."""

    try:
        action()
    except QrngError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except httpx.HTTPError as exc:
        _err_console.print(f"[red]Error:[/red] Could not reach the QRNG service: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _wait_for_exit(state)


def _lotto(state: CliState) -> None:
    hooks = PipelineHooks(intention=_announce_intention)
    source = AnuQrngSource(state.settings)
    run = asyncio.run(run_lotto(source, settings=state.settings, hooks=hooks))

    if run.result is None:
        print_outcome_error(_console, run.outcome)
        return
    print_lotto_result(_console, run.result)


def _random_array(
    state: CliState,
    data_type: DataType | None,
    length: int | None,
    block_size: int | None,
) -> None:
    params = resolve_request_parameters(data_type, length, block_size, console=_console)
    source = AnuQrngSource(state.settings)
    run = asyncio.run(run_random_array(source, params))

    outcome = run.outcome
    if outcome.is_upstream_error:
        raise UpstreamHTTPError(outcome.status_code or 0, outcome.reason)
    if outcome.is_decode_error or run.result is None:
        print_outcome_error(_console, outcome)
        return
    print_random_array(_console, run.result)


def _interactive(state: CliState) -> None:
    print_banner(_console)
    choice = select_option("Choose an option:", [MENU_LOTTO, MENU_RANDOM_ARRAY], console=_console)

    if choice == MENU_LOTTO:
        _console.print("[green]Fetching Lotto numbers...[/green]")
        _lotto(state)
    else:
        _console.print("[blue]Fetching Random Array...[/blue]")
        _random_array(state, None, None, None)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
    no_pause: bool = typer.Option(False, "--no-pause", help="Exit without waiting for Enter."),
) -> None:
    """Without a subcommand, opens the interactive menu."""

    settings = AppSettings()
    configure_logging(settings.log_level, verbose=verbose)
    state = CliState(settings=settings, pause=settings.pause_on_exit and not no_pause)
    ctx.obj = state

    if ctx.invoked_subcommand is None:
        _execute(state, lambda: _interactive(state))


@app.command()
def lotto(ctx: typer.Context) -> None:
    """Draw up to 6 unique numbers (1-49) from 10 quantum bytes."""

    state: CliState = ctx.obj
    _execute(state, lambda: _lotto(state))


@app.command(name="random-array")
def random_array(
    ctx: typer.Context,
    data_type: Optional[DataType] = typer.Option(
        None,
        "--data-type",
        "-d",
        case_sensitive=False,
        help="Value type (prompted when omitted).",
    ),
    length: Optional[int] = typer.Option(
        None,
        "--length",
        "-l",
        min=MIN_LENGTH,
        max=MAX_LENGTH,
        help="Array length (prompted when omitted).",
    ),
    block_size: Optional[int] = typer.Option(
        None,
        "--block-size",
        "-b",
        min=MIN_LENGTH,
        max=MAX_LENGTH,
        help="Bytes per hex string, hex16 only (prompted when omitted).",
    ),
) -> None:
    """Fetch a random array of the requested type and length."""

    state: CliState = ctx.obj
    _execute(state, lambda: _random_array(state, data_type, length, block_size))


def run() -> None:
    app()

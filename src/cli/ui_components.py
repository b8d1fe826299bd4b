"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Los mensajes de error son los mismos para lotto y random-array.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import FetchOutcome, LottoResult, OutcomeKind, RandomArrayResult

_ERROR_MESSAGES: dict[OutcomeKind, str] = {
    OutcomeKind.SERVER_ERROR: "Error: Server issue, please try again later.",
    OutcomeKind.API_REJECTED: "Error: Rate limit reached or other API issue.",
    OutcomeKind.MALFORMED: "Error: Failed to parse the response.",
}


def print_banner(console: Console) -> None:
    """Imprime el banner del modo interactivo."""

    title = Text("Quantum RNG CLI", style="bold cyan")
    subtitle = Text("Fetches quantum random numbers from ANU QRNG API", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_status(outcome: FetchOutcome) -> str:
    return f"{outcome.status_code} {outcome.reason}".strip()


def outcome_error_message(outcome: FetchOutcome) -> str:
    if outcome.kind is OutcomeKind.HTTP_ERROR:
        return f"Error: Failed to fetch data. Status: {format_status(outcome)}"
    return _ERROR_MESSAGES.get(outcome.kind, "Error: Unexpected response.")


def print_outcome_error(console: Console, outcome: FetchOutcome) -> None:
    console.print(f"[red]{escape(outcome_error_message(outcome))}[/red]", highlight=False)


def print_lotto_result(console: Console, result: LottoResult) -> None:
    console.print(f"Lotto Numbers: {escape(str(result.numbers))}", soft_wrap=True, highlight=False)


def print_random_array(console: Console, result: RandomArrayResult) -> None:
    console.print(f"Random Array: {escape(str(result.values))}", soft_wrap=True, highlight=False)


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="Quantum RNG CLI Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API URL", "OK", settings.api_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Intention delay", "OK", f"{settings.intention_delay_seconds:g}s")
    table.add_row("Pause on exit", "OK", "yes" if settings.pause_on_exit else "no")
    return table

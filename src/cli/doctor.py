"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

from rich.console import Console

from adapters.anu_qrng import AnuQrngSource
from core.config import AppSettings
from core.domain.models import DataType, RequestParameters
from cli.ui_components import build_settings_table, format_status, outcome_error_message

_console = Console()

_PROBE = RequestParameters(data_type=DataType.UINT8, length=1)


async def _check_qrng(settings: AppSettings) -> tuple[bool, str]:
    try:
        outcome = await AnuQrngSource(settings).fetch(_PROBE)
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__
    if outcome.ok:
        return True, f"HTTP {format_status(outcome)}"
    return False, outcome_error_message(outcome)


def run() -> None:
    """Show the effective configuration and probe the QRNG endpoint."""

    settings = AppSettings()
    table = build_settings_table(settings)

    ok_qrng, detail_qrng = asyncio.run(_check_qrng(settings))
    table.add_row("QRNG connectivity", "OK" if ok_qrng else "FAIL", detail_qrng)

    _console.print(table)

    if not ok_qrng:
        _console.print(
            "\n[yellow]Note:[/yellow] The ANU service rate-limits anonymous clients; "
            "wait a minute and retry before changing the configuration."
        )

"""Prompts interactivos (resolución de parámetros).

Por qué separado de `cli.main`:
- Los loops de validación se prueban sin levantar la app Typer.
- Cancelar un prompt (EOF/Ctrl-C, que click convierte en `Abort`) se traduce a
  `InputCancelledError` en vez de reventar el proceso.
"""

from __future__ import annotations

from typing import Sequence

import click
import typer
from rich.console import Console

from core.domain.models import MAX_LENGTH, MIN_LENGTH, DataType, RequestParameters
from core.errors import InputCancelledError


def _bounded_int_proc(minimum: int, maximum: int):
    message = f"Invalid input. Enter a number between {minimum} and {maximum}."

    def convert(text: str) -> int:
        try:
            value = click.INT.convert(text, None, None)
        except click.BadParameter as exc:
            raise click.UsageError(message) from exc
        if not minimum <= value <= maximum:
            raise click.UsageError(message)
        return value

    return convert


def prompt_bounded_int(
    label: str,
    *,
    minimum: int = MIN_LENGTH,
    maximum: int = MAX_LENGTH,
) -> int:
    """Pide un entero en [minimum, maximum] hasta que el usuario acierte.

    No hay límite de reintentos: es un prompt para humanos.
    """

    try:
        return typer.prompt(
            f"Enter {label} ({minimum}-{maximum})",
            value_proc=_bounded_int_proc(minimum, maximum),
        )
    except click.Abort as exc:
        raise InputCancelledError() from exc


def select_option(title: str, options: Sequence[str], *, console: Console) -> str:
    """Menú numerado; acepta el índice o el texto de la opción."""

    console.print(f"[bold]{title}[/bold]")
    for index, option in enumerate(options, start=1):
        console.print(f"  [cyan]{index}[/cyan]) {option}")

    indexes = [str(index) for index in range(1, len(options) + 1)]
    try:
        answer = typer.prompt(
            "Selection",
            type=click.Choice([*indexes, *options], case_sensitive=False),
            show_choices=False,
        )
    except click.Abort as exc:
        raise InputCancelledError() from exc

    if answer in indexes:
        return options[int(answer) - 1]
    return answer


def prompt_data_type(*, console: Console) -> DataType:
    return DataType(select_option("Choose data type:", DataType.choices(), console=console))


def resolve_request_parameters(
    data_type: DataType | None,
    length: int | None,
    block_size: int | None,
    *,
    console: Console,
) -> RequestParameters:
    """Completa los parámetros que faltan preguntando al usuario.

    Valores recibidos por flags se usan tal cual (y se validan igual que los
    del prompt). El block size solo se pide para hex16.
    """

    if data_type is None:
        data_type = prompt_data_type(console=console)
    if length is None:
        length = prompt_bounded_int("array length")
    if data_type is DataType.HEX16:
        if block_size is None:
            block_size = prompt_bounded_int("block size")
    else:
        block_size = None

    return RequestParameters.build(data_type, length, block_size)

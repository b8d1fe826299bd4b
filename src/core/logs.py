"""Logging setup.

Diagnostics go to stderr through Rich so they never mix with the numbers
printed on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "qrng-cli"


def configure_logging(level: str = "WARNING", *, verbose: bool = False) -> None:
    """Install a single RichHandler on the root logger (idempotent)."""

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else level)
    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)

"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI decide el código de salida a partir del tipo de error, sin conocer
  detalles de httpx ni de los prompts.
"""

from __future__ import annotations


class QrngError(Exception):
    """Base para errores controlados de la aplicación."""


class InputCancelledError(QrngError):
    """El usuario abandonó un prompt (EOF o Ctrl-C)."""

    def __init__(self, message: str = "Input cancelled.") -> None:
        super().__init__(message)


class ParameterValidationError(QrngError):
    """Parámetros de request fuera de rango o inconsistentes."""


class UpstreamHTTPError(QrngError):
    """El servicio QRNG respondió con un status no exitoso."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}".strip()
        super().__init__(f"Failed to fetch data. Status: {status}")

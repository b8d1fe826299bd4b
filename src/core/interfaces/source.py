"""Contrato de fuentes de aleatoriedad.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP del QRNG por un fake en tests sin acoplar
  el Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import FetchOutcome, RequestParameters


@runtime_checkable
class RandomSource(Protocol):
    """Contrato mínimo para una fuente de números aleatorios.

    Reglas de diseño:
    - `fetch` es asíncrono porque típicamente hará I/O (HTTP).
    - Fallos upstream y de decodificación se devuelven en `FetchOutcome`;
      solo errores de transporte se propagan como excepción.
    """

    async def fetch(self, params: RequestParameters) -> FetchOutcome:
        """Hace una única petición y devuelve el resultado clasificado."""

        ...

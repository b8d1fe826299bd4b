"""Fuente QRNG: ANU Quantum Random Numbers.

Una petición GET por invocación:
- `build_request_url` compone la URL (`length`, `type`, `size` solo en hex16).
- `AnuQrngSource.fetch` clasifica status HTTP y decodifica el body contra el
  modelo del tipo pedido.
"""

from __future__ import annotations

import logging
import re

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import (
    PAYLOAD_MODELS,
    DataType,
    FetchOutcome,
    OutcomeKind,
    RequestParameters,
)
from core.interfaces.source import RandomSource

logger = logging.getLogger(__name__)

# El API responde 200 con {"success": false} cuando limita la tasa.
_API_REJECTED_RE = re.compile(r'"success"\s*:\s*false')


def build_request_url(base_url: str, params: RequestParameters) -> str:
    query: dict[str, str | int] = {
        "length": params.length,
        "type": params.data_type.value,
    }
    if params.data_type is DataType.HEX16 and params.block_size is not None:
        query["size"] = params.block_size
    return str(httpx.URL(base_url, params=query))


def classify_status(status_code: int) -> OutcomeKind:
    if 200 <= status_code < 300:
        return OutcomeKind.OK
    if 500 <= status_code < 600:
        return OutcomeKind.SERVER_ERROR
    return OutcomeKind.HTTP_ERROR


def decode_body(body: str, data_type: DataType) -> tuple[OutcomeKind, list[int] | list[str]]:
    """Decodifica el body al variante de `data_type`.

    Si no encaja, distingue rechazo del API (rate limit) de respuesta rota.
    """

    model = PAYLOAD_MODELS[data_type]
    try:
        payload = model.model_validate_json(body)
    except ValidationError:
        if _API_REJECTED_RE.search(body):
            return OutcomeKind.API_REJECTED, []
        return OutcomeKind.MALFORMED, []
    return OutcomeKind.OK, list(payload.data)


class AnuQrngSource(RandomSource):
    """Cliente del endpoint JSON de ANU."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch(self, params: RequestParameters) -> FetchOutcome:
        url = build_request_url(self._settings.api_url, params)
        logger.debug("GET %s", url)

        if self._client is not None:
            response = await self._client.get(url)
        else:
            async with build_async_client(self._settings) as client:
                response = await client.get(url)

        kind = classify_status(response.status_code)
        body = response.text
        if kind is not OutcomeKind.OK:
            logger.debug("QRNG answered HTTP %s", response.status_code)
            return FetchOutcome(
                kind=kind,
                url=url,
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=body,
            )

        kind, values = decode_body(body, params.data_type)
        if kind is not OutcomeKind.OK:
            logger.debug("Could not decode QRNG response (%s): %.200s", kind.value, body)

        return FetchOutcome(
            kind=kind,
            url=url,
            status_code=response.status_code,
            reason=response.reason_phrase,
            values=values,
            body=body,
        )

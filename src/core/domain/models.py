"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El cuerpo JSON del QRNG se valida contra el modelo del tipo pedido, así que
  "JSON inválido" y "JSON con forma inesperada" caen en el mismo error.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Union

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic.config import ConfigDict

from core.errors import ParameterValidationError

MIN_LENGTH = 1
MAX_LENGTH = 1024


class DataType(str, Enum):
    """Tipos de dato soportados por el endpoint (valor = string del query)."""

    UINT8 = "uint8"
    UINT16 = "uint16"
    HEX16 = "hex16"

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


class RequestParameters(BaseModel):
    """Parámetros de una única petición al QRNG.

    Invariante: `block_size` existe si y solo si `data_type` es `hex16`.
    """

    model_config = ConfigDict(frozen=True)

    data_type: DataType = Field(
        ...,
        description="Tipo de dato pedido al servicio.",
    )
    length: int = Field(
        ...,
        ge=MIN_LENGTH,
        le=MAX_LENGTH,
        description="Cantidad de valores a generar.",
    )
    block_size: int | None = Field(
        default=None,
        ge=MIN_LENGTH,
        le=MAX_LENGTH,
        description="Bytes por string hexadecimal (solo hex16).",
    )

    @model_validator(mode="after")
    def _block_size_only_for_hex(self) -> "RequestParameters":
        if self.data_type is DataType.HEX16 and self.block_size is None:
            raise ValueError("block_size is required for hex16")
        if self.data_type is not DataType.HEX16 and self.block_size is not None:
            raise ValueError("block_size is only valid for hex16")
        return self

    @classmethod
    def build(
        cls,
        data_type: DataType,
        length: int,
        block_size: int | None = None,
    ) -> "RequestParameters":
        """Construye parámetros desde input suelto.

        Un `block_size` recibido para un tipo que no es hex16 se descarta.
        """

        if data_type is not DataType.HEX16:
            block_size = None
        try:
            return cls(data_type=data_type, length=length, block_size=block_size)
        except ValidationError as exc:
            details = "; ".join(err["msg"] for err in exc.errors())
            raise ParameterValidationError(details) from exc


# Tagged variant del body: un modelo por tipo pedido. Enteros estrictos: JSON
# true o 2.0 no cuentan como byte.
Uint8Value = Annotated[int, Field(strict=True, ge=0, le=0xFF)]
Uint16Value = Annotated[int, Field(strict=True, ge=0, le=0xFFFF)]
HexValue = Annotated[str, Field(pattern=r"^[0-9a-fA-F]+$")]


class Uint8Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Uint8Value]


class Uint16Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[Uint16Value]


class Hex16Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[HexValue]


QrngPayload = Union[Uint8Payload, Uint16Payload, Hex16Payload]

PAYLOAD_MODELS: dict[DataType, type[QrngPayload]] = {
    DataType.UINT8: Uint8Payload,
    DataType.UINT16: Uint16Payload,
    DataType.HEX16: Hex16Payload,
}


class OutcomeKind(str, Enum):
    """Clasificación del resultado de una petición."""

    OK = "ok"
    SERVER_ERROR = "server_error"
    HTTP_ERROR = "http_error"
    API_REJECTED = "api_rejected"
    MALFORMED = "malformed"


class FetchOutcome(BaseModel):
    """Resultado tipado de una petición al QRNG.

    Por qué un único tipo:
    - Errores upstream y de decodificación viajan por el mismo canal; la capa
      de comandos decide qué es fatal.
    """

    kind: OutcomeKind = Field(
        ...,
        description="Éxito o categoría de fallo.",
    )
    url: str = Field(
        ...,
        description="URL consultada.",
    )
    status_code: int | None = Field(
        default=None,
        description="Status HTTP recibido.",
    )
    reason: str = Field(
        default="",
        description="Reason phrase HTTP (p.ej. 'Service Unavailable').",
    )
    values: list[int] | list[str] = Field(
        default_factory=list,
        description="Valores decodificados (solo si kind == ok).",
    )
    body: str = Field(
        default="",
        description="Body crudo para diagnóstico.",
    )

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @property
    def is_upstream_error(self) -> bool:
        return self.kind in (OutcomeKind.SERVER_ERROR, OutcomeKind.HTTP_ERROR)

    @property
    def is_decode_error(self) -> bool:
        return self.kind in (OutcomeKind.API_REJECTED, OutcomeKind.MALFORMED)


class LottoResult(BaseModel):
    """Números del sorteo Lotto derivados de bytes cuánticos."""

    numbers: list[Annotated[int, Field(ge=1, le=49)]] = Field(
        default_factory=list,
        max_length=6,
        description="Hasta 6 números únicos en orden ascendente.",
    )
    source: list[int] = Field(
        default_factory=list,
        description="Bytes crudos usados para el sorteo.",
    )


class RandomArrayResult(BaseModel):
    """Array aleatorio tal cual lo devolvió el servicio."""

    params: RequestParameters
    values: list[int] | list[str] = Field(
        default_factory=list,
        description="Valores en el orden del decoder, sin transformar.",
    )

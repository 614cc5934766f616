"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde y objetos inmutables (`frozen`) sin escribir
  `__eq__`/`__hash__` a mano.
- `ExchangeRateResponse` valida el JSON del proveedor en un solo paso.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.iso4217 import ISO_4217_CODES


class CurrencyCode(BaseModel):
    """Código ISO-4217 ya validado y normalizado (p.ej. `USD`)."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Código alfabético ISO-4217 en mayúsculas.",
    )

    @field_validator("code")
    @classmethod
    def _known_code(cls, value: str) -> str:
        if value not in ISO_4217_CODES:
            raise ValueError(f"unknown ISO-4217 code: {value!r}")
        return value

    def __str__(self) -> str:
        return self.code


class ConversionRequest(BaseModel):
    """Entrada de una invocación: importe y par de monedas."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(
        ...,
        allow_inf_nan=False,
        description="Importe en la moneda origen.",
    )
    source: CurrencyCode
    target: CurrencyCode


# Números JSON finitos; `"0.89"`, `true` o `NaN` no son un rate.
Rate = Annotated[float, Field(strict=True, allow_inf_nan=False)]


class ExchangeRateResponse(BaseModel):
    """Forma mínima del body de `/latest`.

    Claves extra del proveedor (`base`, `date`, ...) se ignoran.
    """

    model_config = ConfigDict(extra="ignore")

    rates: dict[str, Rate] = Field(
        ...,
        description="Mapa código -> rate respecto a la moneda base.",
    )


class ConversionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., description="Importe convertido (sin redondeo).")
    rate: float = Field(..., description="Rate aplicado (origen -> destino).")
    source: CurrencyCode
    target: CurrencyCode

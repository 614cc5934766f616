"""Validación de códigos de moneda ISO-4217.

Por qué aquí:
- Es lógica pura del dominio: no hace I/O y se ejecuta antes de cualquier
  petición de red.
- La tabla vive en `core.domain.iso4217`.
"""

from __future__ import annotations

import math

from core.domain.errors import InvalidAmount, InvalidCurrencyCode
from core.domain.iso4217 import is_iso_4217
from core.domain.models import ConversionRequest, CurrencyCode


def parse_currency_code(code: str) -> CurrencyCode:
    """Valida y normaliza un código introducido por el usuario.

    Reglas:
    - Case-insensitive (`usd` -> `USD`).
    - No se recortan espacios: `" USD"` es inválido.
    """

    if not isinstance(code, str) or not is_iso_4217(code):
        raise InvalidCurrencyCode(str(code))
    return CurrencyCode(code=code.upper())


def parse_input(amount: float, src: str, dst: str) -> ConversionRequest:
    """Construye la `ConversionRequest` a partir de los valores crudos de la CLI."""

    source = parse_currency_code(src)
    target = parse_currency_code(dst)
    if math.isnan(amount) or math.isinf(amount):
        raise InvalidAmount(amount)
    return ConversionRequest(amount=amount, source=source, target=target)

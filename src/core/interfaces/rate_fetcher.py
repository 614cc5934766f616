"""Contrato del proveedor de rates.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El conversor se prueba con un stub en memoria, sin I/O de red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CurrencyCode


@runtime_checkable
class RateFetcher(Protocol):
    """Algo capaz de devolver el rate `base -> target`.

    Reglas de diseño:
    - `fetch_rate` es asíncrono porque típicamente hará I/O (HTTP).
    - Devuelve un único rate por llamada; los fallos se lanzan como
      `core.domain.errors.FiatConvError`.
    """

    async def fetch_rate(self, base: CurrencyCode, target: CurrencyCode) -> float:
        """Devuelve el multiplicador para convertir de `base` a `target`."""

        ...

"""Conversión de importes.

Este módulo es el único punto que combina una `ConversionRequest` con un
`RateFetcher`. No hace I/O por sí mismo: el fetcher inyectado decide cómo se
obtiene el rate, lo que permite probar el flujo con un stub.
"""

from __future__ import annotations

import logging

from core.domain.models import ConversionRequest, ConversionResult
from core.interfaces.rate_fetcher import RateFetcher

logger = logging.getLogger(__name__)


def convert(amount: float, rate: float) -> float:
    """`amount * rate`, sin redondeo."""

    return amount * rate


async def convert_currency(fetcher: RateFetcher, request: ConversionRequest) -> ConversionResult:
    """Obtiene el rate y aplica la conversión.

    Los errores del fetcher se propagan sin envolver: la CLI es quien decide
    cómo mostrarlos.
    """

    rate = await fetcher.fetch_rate(request.source, request.target)
    converted = convert(request.amount, rate)
    logger.debug(
        "%s %s -> %s %s (rate=%s)",
        request.source,
        request.amount,
        request.target,
        converted,
        rate,
    )
    return ConversionResult(
        amount=converted,
        rate=rate,
        source=request.source,
        target=request.target,
    )

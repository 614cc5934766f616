"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El formato de salida es decisión de presentación; el Core nunca redondea.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.text import Text

from core.domain.models import ConversionRequest, ConversionResult


def format_amount(value: float, precision: int | None = None) -> str:
    """Texto numérico sin locale (`1234.5`, no `1,234.50`)."""

    if precision is None:
        return str(value)
    return f"{value:.{precision}f}"


def render_result_line(
    request: ConversionRequest,
    result: ConversionResult,
    *,
    precision: int | None = None,
) -> str:
    """`<SRC> <amount> -> <DST> <converted>`."""

    return (
        f"{request.source} {format_amount(request.amount)} -> "
        f"{result.target} {format_amount(result.amount, precision)}"
    )


def render_result_json(
    request: ConversionRequest,
    result: ConversionResult,
    *,
    precision: int | None = None,
) -> str:
    converted = result.amount if precision is None else round(result.amount, precision)
    payload = {
        "source": str(request.source),
        "target": str(result.target),
        "amount": request.amount,
        "rate": result.rate,
        "converted": converted,
    }
    return json.dumps(payload, ensure_ascii=False, sort_keys=True)


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("error: ", "bold red"), message))

"""CLI de fiatconv (Typer).

Uso:
    fiatconv AMOUNT SRC DST [--api-url URL] [--proxy URL] [--json] ...

La CLI es la única capa que:
- construye el cliente HTTP (directo o vía proxy),
- captura `FiatConvError` y lo convierte en exit code 2.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.exchange_rates import ExchangeRatesClient, parse_api_url
from adapters.http_client import build_async_client, parse_proxy_url
from cli.ui_components import print_error, render_result_json, render_result_line
from core.config import AppSettings, SymbolsMode
from core.domain.currency import parse_input
from core.domain.errors import FiatConvError
from core.domain.models import ConversionRequest, ConversionResult
from core.logging_config import setup_logging
from core.services.converter import convert_currency

EXIT_FAILURE = 2

app = typer.Typer(
    add_completion=False,
    help="Convert an amount between two ISO-4217 currencies using a remote exchange-rate API.",
)

_err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


async def _convert(
    settings: AppSettings,
    request: ConversionRequest,
    api_url: httpx.URL,
    proxy: httpx.URL | None,
) -> ConversionResult:
    async with build_async_client(settings, proxy=proxy) as client:
        fetcher = ExchangeRatesClient(api_url, client, symbols_mode=settings.symbols_mode)
        return await convert_currency(fetcher, request)


# "-5" o "---" son posicionales (importe negativo, código inválido), no opciones.
@app.command(context_settings={"ignore_unknown_options": True})
def convert(
    amount: Annotated[float, typer.Argument(metavar="AMOUNT", help="Decimal amount of source currency.")],
    src: Annotated[str, typer.Argument(metavar="SRC", help="ISO currency code of source currency.")],
    dst: Annotated[str, typer.Argument(metavar="DST", help="ISO currency code of destination currency.")],
    api_url: Annotated[
        Optional[str],
        typer.Option("--api-url", help="Exchange API address (default from FIATCONV_API_URL)."),
    ] = None,
    proxy: Annotated[
        Optional[str],
        typer.Option("--proxy", help="Optional proxy URL, e.g. http://host:port."),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", min=0, help="Request timeout in seconds."),
    ] = None,
    symbols_mode: Annotated[
        Optional[SymbolsMode],
        typer.Option("--symbols-mode", case_sensitive=False, help="Request only DST ('target') or SRC,DST ('pair')."),
    ] = None,
    precision: Annotated[
        Optional[int],
        typer.Option("--precision", min=0, help="Round the displayed converted amount."),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON.")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging on stderr.")] = False,
) -> None:
    """Convert AMOUNT from SRC currency to DST currency."""

    overrides: dict[str, object] = {}
    if api_url is not None:
        overrides["api_url"] = api_url
    if proxy is not None:
        overrides["proxy"] = proxy
    if timeout is not None:
        overrides["http_timeout_seconds"] = timeout
    if symbols_mode is not None:
        overrides["symbols_mode"] = symbols_mode
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    setup_logging("DEBUG" if verbose else settings.log_level)

    try:
        request = parse_input(amount, src, dst)
        proxy_url = parse_proxy_url(settings.proxy) if settings.proxy else None
        base_url = parse_api_url(settings.api_url)
        result = asyncio.run(_convert(settings, request, base_url, proxy_url))
    except FiatConvError as exc:
        logger.debug("conversion failed", exc_info=True)
        print_error(_err_console, str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    if as_json:
        typer.echo(render_result_json(request, result, precision=precision))
    else:
        typer.echo(render_result_line(request, result, precision=precision))


def run() -> None:
    app()


if __name__ == "__main__":
    run()

"""Cliente de la API de rates (estilo exchangeratesapi.io).

Contrato HTTP:
- `GET <api_url>/latest?base=<BASE>&symbols=<SYMBOLS>`
- Respuesta: `{"rates": {"EUR": 0.89, ...}}` (otras claves se ignoran).

Este adaptador traduce todos los fallos de httpx/pydantic a errores del dominio.
No reintenta: un fallo se devuelve tal cual a la CLI.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from core.config import SymbolsMode
from core.domain.errors import DecodeError, InvalidAPIURL, NetworkError, RateNotFound
from core.domain.models import CurrencyCode, ExchangeRateResponse
from core.interfaces.rate_fetcher import RateFetcher

logger = logging.getLogger(__name__)


def parse_api_url(raw: str) -> httpx.URL:
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidAPIURL(raw, str(exc)) from exc

    if url.scheme not in ("http", "https"):
        raise InvalidAPIURL(raw, f"unsupported scheme {url.scheme!r}")
    if not url.host:
        raise InvalidAPIURL(raw, "missing host")
    return url


class ExchangeRatesClient(RateFetcher):
    """Obtiene el rate `base -> target` con una única petición GET."""

    latest_path = "latest"

    def __init__(
        self,
        api_url: str | httpx.URL,
        client: httpx.AsyncClient,
        *,
        symbols_mode: SymbolsMode = SymbolsMode.TARGET,
    ) -> None:
        self._api_url = api_url if isinstance(api_url, httpx.URL) else parse_api_url(api_url)
        self._client = client
        self._symbols_mode = symbols_mode

    def build_url(self, base: CurrencyCode, target: CurrencyCode) -> httpx.URL:
        """URL final de la consulta; no modifica `api_url`."""

        path = self._api_url.path.rstrip("/") + "/" + self.latest_path
        if self._symbols_mode is SymbolsMode.PAIR:
            symbols = f"{base},{target}"
        else:
            symbols = str(target)
        url = self._api_url.copy_with(path=path)
        return url.copy_merge_params({"base": str(base), "symbols": symbols})

    async def fetch_rate(self, base: CurrencyCode, target: CurrencyCode) -> float:
        url = self.build_url(base, target)
        logger.debug("GET %s", url)

        try:
            resp = await self._client.get(url)
        except httpx.DecodingError as exc:
            # gzip/brotli corrupto: el body existe pero no se puede leer.
            logger.warning("undecodable body from %s: %s", url, exc)
            raise DecodeError(f"cannot decode exchange API response: {exc}") from exc
        except httpx.RequestError as exc:
            logger.warning("request to %s failed: %s", url, exc)
            raise NetworkError(f"request to {url} failed: {exc}") from exc

        if not resp.is_success:
            logger.warning("%s answered HTTP %s", url, resp.status_code)
            raise NetworkError(
                f"exchange API answered HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            data = ExchangeRateResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"] if exc.error_count() else str(exc)
            logger.warning("undecodable response from %s: %s", url, reason)
            raise DecodeError(f"cannot decode exchange API response: {reason}") from exc

        rate = data.rates.get(str(target))
        if rate is None:
            logger.warning("%s has no rate for %s", url, target)
            raise RateNotFound(str(target))
        return rate

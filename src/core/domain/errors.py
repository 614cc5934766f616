"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura un único tipo base (`FiatConvError`) y decide el exit code.
- Los adaptadores traducen excepciones de librerías (httpx, pydantic) a estos
  tipos, así el Core no depende de ellas.
"""

from __future__ import annotations


class FiatConvError(Exception):
    """Base de todos los fallos esperados de una conversión."""


class InvalidCurrencyCode(FiatConvError, ValueError):
    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"invalid currency code: {code!r}")


class InvalidAmount(FiatConvError, ValueError):
    def __init__(self, amount: float) -> None:
        self.amount = amount
        super().__init__(f"invalid amount: {amount!r}")


class InvalidProxyURL(FiatConvError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"invalid proxy URL {url!r}: {reason}")


class InvalidAPIURL(FiatConvError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"invalid API URL {url!r}: {reason}")


class NetworkError(FiatConvError):
    """La petición no se pudo enviar, no hubo respuesta o el status no es 2xx."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class DecodeError(FiatConvError):
    """El body no tiene la forma `{"rates": {...}}`."""


class RateNotFound(FiatConvError):
    """Respuesta válida pero sin el rate de la moneda destino."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"exchange rate for {currency} not found")

import asyncio

import pytest

from core.domain.currency import parse_currency_code, parse_input
from core.domain.errors import NetworkError, RateNotFound
from core.domain.models import CurrencyCode
from core.interfaces.rate_fetcher import RateFetcher
from core.services.converter import convert, convert_currency


class StubFetcher:
    def __init__(self, rate: float = 1.0, error: Exception | None = None) -> None:
        self.rate = rate
        self.error = error
        self.calls: list[tuple[CurrencyCode, CurrencyCode]] = []

    async def fetch_rate(self, base: CurrencyCode, target: CurrencyCode) -> float:
        self.calls.append((base, target))
        if self.error is not None:
            raise self.error
        return self.rate


@pytest.mark.parametrize(
    "amount, rate",
    [(2.0, 3.0), (1.23, 0.89), (0.0, 5.0), (100.0, 0.0), (-4.0, 1.5), (0.1, 0.2)],
)
def test_convert_is_plain_multiplication(amount, rate):
    assert convert(amount, rate) == amount * rate


def test_stub_satisfies_protocol():
    assert isinstance(StubFetcher(), RateFetcher)


def test_convert_currency_normal_case():
    fetcher = StubFetcher(rate=3.0)
    request = parse_input(2.0, "USD", "EUR")

    result = asyncio.run(convert_currency(fetcher, request))

    assert result.amount == 6.0
    assert result.rate == 3.0
    assert str(result.source) == "USD"
    assert str(result.target) == "EUR"
    assert fetcher.calls == [(parse_currency_code("USD"), parse_currency_code("EUR"))]


@pytest.mark.parametrize("error", [NetworkError("boom"), RateNotFound("EUR")])
def test_convert_currency_propagates_fetch_error_unchanged(error):
    fetcher = StubFetcher(rate=1.0, error=error)
    request = parse_input(2.0, "USD", "EUR")

    with pytest.raises(type(error)) as excinfo:
        asyncio.run(convert_currency(fetcher, request))
    assert excinfo.value is error

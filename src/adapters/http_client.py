"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la política de proxy en un único sitio.
- Facilita testeo: se puede sustituir el transport por `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.errors import InvalidProxyURL

PROXY_SCHEMES = frozenset({"http", "https", "socks5", "socks5h"})


def parse_proxy_url(raw: str) -> httpx.URL:
    """Valida la URL del proxy (`http://host:port`, `socks5://...`)."""

    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidProxyURL(raw, str(exc)) from exc

    if url.scheme not in PROXY_SCHEMES:
        raise InvalidProxyURL(raw, f"unsupported scheme {url.scheme!r}")
    if not url.host:
        raise InvalidProxyURL(raw, "missing host")
    return url


def build_async_client(
    settings: AppSettings | None = None,
    *,
    proxy: httpx.URL | str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - La CLI decide entre conexión directa o proxy; el fetcher solo recibe
      el cliente ya configurado.
    - `transport` permite inyectar un transport falso en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if proxy is not None and not isinstance(proxy, httpx.URL):
        proxy = parse_proxy_url(proxy)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        proxy=proxy,
        transport=transport,
    )

"""Current share price lookup over HTTP."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from stockclerk.exceptions import PriceFetchError
from stockclerk.models.money import Money

logger = logging.getLogger(__name__)

DEFAULT_PRICE_URL = "https://query1.finance.yahoo.com/v8/finance/chart/{ticker}?interval=1d&range=1d"
DEFAULT_TIMEOUT = 5.0
USER_AGENT = "stockclerk/0.1"


def fetch_share_price(
    ticker: str,
    client: httpx.Client | None = None,
    url_template: str = DEFAULT_PRICE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> Money:
    """Fetch the latest share price for ``ticker``.

    ``url_template`` is formatted with ``ticker``. The endpoint may answer
    with a Yahoo chart payload or with a bare number.

    Raises:
        PriceFetchError: on network errors, non-2xx responses or an
            unrecognized payload.
    """
    if client is None:
        with httpx.Client(timeout=timeout, headers={"User-Agent": USER_AGENT}) as owned:
            return fetch_share_price(ticker, owned, url_template, timeout)

    url = url_template.format(ticker=quote(ticker.upper()))
    logger.info("Fetching share price for %s from %s", ticker, url)
    try:
        response = client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as exc:
        raise PriceFetchError(ticker, str(exc)) from exc
    except ValueError as exc:
        raise PriceFetchError(ticker, f"response is not JSON: {exc}") from exc

    price = _extract_price(payload)
    if price is None:
        raise PriceFetchError(ticker, "no price in response")
    if price <= 0:
        raise PriceFetchError(ticker, f"non-positive price {price}")
    logger.debug("Share price for %s: %s", ticker, price)
    return Money.new(price)


def _extract_price(payload: Any) -> float | None:
    if isinstance(payload, (int, float)) and not isinstance(payload, bool):
        return float(payload)
    if not isinstance(payload, dict):
        return None
    results = (payload.get("chart") or {}).get("result") or []
    if not results or not isinstance(results[0], dict):
        return None
    price = (results[0].get("meta") or {}).get("regularMarketPrice")
    if isinstance(price, (int, float)) and not isinstance(price, bool):
        return float(price)
    return None

"""Tests for the share price lookup."""

import httpx
import pytest

from stockclerk.exceptions import PriceFetchError
from stockclerk.models.money import Money
from stockclerk.pricing import fetch_share_price


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _chart(price) -> dict:
    return {"chart": {"result": [{"meta": {"symbol": "PVTL", "regularMarketPrice": price}}]}}


class TestFetchSharePrice:
    def test_chart_payload(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json=_chart(9.9))

        price = fetch_share_price("pvtl", client=_client(handler))
        assert price == Money.new(9.90)
        assert seen[0].path.endswith("/PVTL")

    def test_bare_number_payload(self):
        client = _client(lambda request: httpx.Response(200, json=14.27))
        price = fetch_share_price(
            "PVTL", client=client, url_template="https://quotes.example/{ticker}/price"
        )
        assert price == Money.new(14.27)

    def test_http_error(self):
        client = _client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(PriceFetchError) as exc_info:
            fetch_share_price("PVTL", client=client)
        assert exc_info.value.ticker == "PVTL"

    def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(PriceFetchError, match="unreachable"):
            fetch_share_price("PVTL", client=_client(handler))

    def test_not_json(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(PriceFetchError, match="not JSON"):
            fetch_share_price("PVTL", client=client)

    def test_missing_price(self):
        client = _client(lambda request: httpx.Response(200, json={"chart": {"result": []}}))
        with pytest.raises(PriceFetchError, match="no price"):
            fetch_share_price("PVTL", client=client)

    def test_non_positive_price(self):
        client = _client(lambda request: httpx.Response(200, json=_chart(0)))
        with pytest.raises(PriceFetchError, match="non-positive"):
            fetch_share_price("PVTL", client=client)

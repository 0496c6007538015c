"""Tests for the price fetcher."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cryptopanic_client import DecodeError, TransportError
from price_fetcher import fetch_price


def api_with(results=None, error=None):
    api = MagicMock()
    api.get_currency = AsyncMock(return_value=results, side_effect=error)
    return api


class TestFetchPrice:

    @pytest.mark.asyncio
    async def test_returns_record(self):
        api = api_with([{
            'code': 'BTC',
            'price_usd': 65000,
            'percent_change_24h': -1.5,
            'market_cap_usd': 1.2e12,
        }])

        record = await fetch_price(api, 'BTC')

        api.get_currency.assert_awaited_once_with('BTC')
        assert record.symbol == 'BTC'
        assert record.price_usd == 65000
        assert record.percent_change_24h == -1.5
        assert record.market_cap_usd == 1.2e12

    @pytest.mark.asyncio
    async def test_string_values_are_converted(self):
        api = api_with([{'price_usd': '100.5', 'percent_change_24h': '2.25'}])
        record = await fetch_price(api, 'BTC')
        assert record.symbol == 'BTC'
        assert record.price_usd == 100.5
        assert record.percent_change_24h == 2.25
        assert record.market_cap_usd == 0.0

    @pytest.mark.asyncio
    async def test_empty_results_are_unavailable(self):
        assert await fetch_price(api_with([]), 'BTC') is None

    @pytest.mark.asyncio
    async def test_missing_price_is_unavailable(self):
        assert await fetch_price(api_with([{'code': 'BTC'}]), 'BTC') is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize('price', [0, '0', -3.5])
    async def test_non_positive_price_is_unavailable(self, price):
        assert await fetch_price(api_with([{'code': 'BTC', 'price_usd': price}]), 'BTC') is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize('error', [TransportError('timeout'), DecodeError('not json')])
    async def test_api_failure_is_unavailable(self, error):
        assert await fetch_price(api_with(error=error), 'BTC') is None

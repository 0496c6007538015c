"""
CryptoPanic API client for the crypto bot.
Wraps the two read-only endpoints the bot uses: news posts and currency prices.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp

logger = logging.getLogger('crypto_bot.cryptopanic_client')


class CryptoPanicError(Exception):
    """Base class for failures talking to the CryptoPanic API."""


class TransportError(CryptoPanicError):
    """Network, DNS, timeout or non-200 HTTP failure."""


class DecodeError(CryptoPanicError):
    """The response body was not JSON or lacked a `results` list."""


class CryptoPanicClient:
    """Thin async client; a new aiohttp session is opened per request."""

    def __init__(self, api_key: str, base_url: str = 'https://cryptopanic.com/api/v1', timeout: float = 30):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    async def get_posts(self, currency: str, kind: Optional[str] = 'news', filter: Optional[str] = 'important') -> List[Dict[str, Any]]:
        """
        Fetch the news post listing.

        Args:
            currency: Currency code, e.g. "BTC"
            kind: Post kind ("news", "media"); omitted when empty
            filter: Listing filter ("important", "hot", ...); omitted when empty

        Returns:
            List[Dict[str, Any]]: The raw `results` entries in API order

        Raises:
            TransportError, DecodeError
        """
        params = {'currencies': currency}
        if kind:
            params['kind'] = kind
        if filter:
            params['filter'] = filter
        return await self._get_results('posts', params)

    async def get_currency(self, symbol: str) -> List[Dict[str, Any]]:
        """
        Fetch market data for one currency.

        Raises:
            TransportError, DecodeError
        """
        return await self._get_results('currencies', {'currencies': symbol})

    async def _get_results(self, endpoint: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        data = await self._get_json(endpoint, params)
        if not isinstance(data, dict) or not isinstance(data.get('results'), list):
            raise DecodeError(f"Unexpected response shape from /{endpoint}/: missing 'results' list")
        return data['results']

    async def _get_json(self, endpoint: str, params: Dict[str, str]) -> Any:
        url = f"{self.base_url}/{endpoint}/"
        query = {'auth_token': self.api_key, **params}
        logger.debug(f"GET {url} params={params}")

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=query) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise TransportError(f"/{endpoint}/ returned status {response.status}: {error_text[:200]}")
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        raise DecodeError(f"/{endpoint}/ returned invalid JSON: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request to /{endpoint}/ failed: {e}") from e

"""Price fetcher for the crypto bot."""

import logging
from typing import Optional

from crypto_models import PriceRecord, price_from_api
from cryptopanic_client import CryptoPanicClient, CryptoPanicError

logger = logging.getLogger('crypto_bot.price_fetcher')

async def fetch_price(api: CryptoPanicClient, symbol: str = 'BTC') -> Optional[PriceRecord]:
    """
    Fetch the current price record for `symbol`.

    Returns:
        Optional[PriceRecord]: The record, or None when the price is unavailable
    """
    try:
        results = await api.get_currency(symbol)
    except CryptoPanicError as e:
        logger.error(f"Failed to fetch {symbol} price: {e}")
        return None

    if not results:
        logger.warning(f"No {symbol} price data returned")
        return None

    record = price_from_api(results[0], symbol)
    if record is None:
        logger.warning(f"Failed to get {symbol} price from data: {str(results[0])[:200]}")
    return record

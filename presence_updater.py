"""Shows the latest price in the bot's presence."""

import logging
from typing import Optional

import discord

from crypto_formatter import CryptoFormatter
from crypto_models import PriceRecord

logger = logging.getLogger('crypto_bot.presence_updater')

async def update_presence(client: discord.Client, record: Optional[PriceRecord]) -> bool:
    """
    Set a "Watching BTC: $65,000.00" activity from a price record.

    Args:
        client: The connected Discord client
        record: The price record, or None when the price is unavailable

    Returns:
        bool: True if the presence was updated
    """
    if record is None:
        logger.warning("No price data available, leaving presence unchanged")
        return False

    text = CryptoFormatter.presence_text(record)
    try:
        activity = discord.Activity(type=discord.ActivityType.watching, name=text)
        await client.change_presence(activity=activity)
    except (discord.HTTPException, discord.ConnectionClosed, ConnectionError) as e:
        logger.error(f"Failed to update presence to '{text}': {e}")
        return False

    logger.info(f"Updated {record.symbol} price: {text}")
    return True

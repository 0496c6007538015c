"""Explicitly constructed state shared by the bot's components."""

import asyncio
from dataclasses import dataclass, field

from config import BotConfig
from cryptopanic_client import CryptoPanicClient
from news_ledger import NewsLedger


@dataclass
class BotContext:
    """Everything a component needs, owned by bot.main() and passed in explicitly."""

    config: BotConfig
    api: CryptoPanicClient
    ledger: NewsLedger
    # Held for a whole fetch-filter-insert step so overlapping news cycles never interleave
    ledger_lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def create_context(config: BotConfig) -> BotContext:
    """Build a BotContext from a validated configuration."""
    return BotContext(
        config=config,
        api=CryptoPanicClient(
            api_key=config.cryptopanic_api_key,
            base_url=config.cryptopanic_base_url,
            timeout=config.request_timeout_seconds,
        ),
        ledger=NewsLedger(capacity=config.max_stored_news_ids),
    )

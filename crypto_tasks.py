import asyncio
from datetime import time, timezone
from typing import List, Optional

import discord
from discord.ext import tasks

from bot_context import BotContext
from logging_config import logger
from news_publisher import run_news_cycle
from presence_updater import update_presence
from price_fetcher import fetch_price

def news_schedule(every_hours: int) -> List[time]:
    """UTC times of day on every `every_hours` boundary, e.g. 2 -> 00:00, 02:00, ... 22:00."""
    every_hours = max(1, min(int(every_hours), 24))
    return [time(hour=hour, minute=0, tzinfo=timezone.utc) for hour in range(0, 24, every_hours)]

class CryptoTasks:
    """
    Owns the two recurring jobs:
    1. Price loop on a fixed interval, updating the bot's presence
    2. News loop on hour boundaries, posting unseen articles

    Both run once right away when started.
    """

    def __init__(self, client: discord.Client, context: BotContext):
        self.client = client
        self.context = context
        config = context.config

        self.price_loop = tasks.loop(minutes=config.price_update_minutes)(self.price_update)
        self.price_loop.before_loop(self._wait_until_ready)

        self.news_loop = tasks.loop(time=news_schedule(config.news_update_hours))(self.news_update)
        self.news_loop.before_loop(self._wait_until_ready)

        self._startup_news: Optional[asyncio.Task] = None

    async def _wait_until_ready(self):
        await self.client.wait_until_ready()

    async def price_update(self):
        """Fetch the price and show it in the presence."""
        try:
            record = await fetch_price(self.context.api, self.context.config.currency)
            await update_presence(self.client, record)
        except Exception as e:
            logger.error(f"Error updating {self.context.config.currency} price: {str(e)}", exc_info=True)

    async def news_update(self):
        """Fetch unseen news and post it to the news channel."""
        try:
            await run_news_cycle(self.client, self.context)
        except Exception as e:
            logger.error(f"Error fetching and posting news: {str(e)}", exc_info=True)

    def start(self):
        """Start both loops. Safe to call again on reconnect."""
        if not self.price_loop.is_running():
            self.price_loop.start()
            logger.info(f"Started price update task (every {self.context.config.price_update_minutes:g} minutes)")

        if not self.news_loop.is_running():
            self.news_loop.start()
            # The calendar loop only fires on schedule, so post once now as well
            self._startup_news = asyncio.create_task(self.news_update())
            logger.info(f"Started news update task (every {self.context.config.news_update_hours} hours)")

    def stop(self):
        self.price_loop.cancel()
        self.news_loop.cancel()
        if self._startup_news and not self._startup_news.done():
            self._startup_news.cancel()

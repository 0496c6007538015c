"""
News publisher for the crypto bot.
Posts new articles to the configured news channel.
"""

import logging
from typing import Optional, Sequence

import discord

from bot_context import BotContext
from crypto_formatter import CryptoFormatter
from crypto_models import ArticleRecord
from news_fetcher import fetch_new_articles

logger = logging.getLogger('crypto_bot.news_publisher')

async def resolve_channel(client: discord.Client, channel_id: int) -> Optional[discord.abc.Messageable]:
    """Look up a channel in the cache, falling back to the API."""
    channel = client.get_channel(channel_id)
    if channel is not None:
        return channel

    try:
        return await client.fetch_channel(channel_id)
    except (discord.NotFound, discord.Forbidden, discord.HTTPException) as e:
        logger.error(f"News channel {channel_id} not found! Check the channel ID. ({e})")
        return None

async def publish_articles(channel: discord.abc.Messageable, articles: Sequence[ArticleRecord]) -> int:
    """
    Send one card per article to an already resolved news channel.

    A failed send stops the rest of this cycle's posts.

    Returns:
        int: Number of cards sent
    """
    posted = 0
    for article in articles:
        try:
            await channel.send(embed=CryptoFormatter.news_embed(article))
            posted += 1
        except discord.HTTPException as e:
            logger.error(f"Failed to post news item {article.id} ('{article.title[:50]}'): {e}")
            break
    return posted

async def run_news_cycle(client: discord.Client, context: BotContext) -> int:
    """
    One scheduled news update: resolve the channel, fetch unseen articles, post them.

    The channel is resolved first so an unreachable channel doesn't use up
    ledger entries.

    Returns:
        int: Number of news items posted
    """
    config = context.config
    channel = await resolve_channel(client, config.news_channel_id)
    if channel is None:
        return 0

    async with context.ledger_lock:
        articles = await fetch_new_articles(
            context.api,
            context.ledger,
            currency=config.currency,
            kind=config.news_kind,
            filter=config.news_filter,
            limit=config.news_posts_per_update,
        )

    posted = await publish_articles(channel, articles)
    logger.info(f"Posted {posted} news items.")
    return posted

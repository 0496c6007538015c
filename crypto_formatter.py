"""
Crypto Response Formatter Module

Turns price and news records into presence strings and Discord embeds.
"""

import math
from datetime import datetime, timezone
from typing import Optional

import discord

import config
from crypto_models import ArticleRecord, PriceRecord

CURRENCY_NAMES = {
    'BTC': 'Bitcoin',
    'ETH': 'Ethereum',
}

class CryptoFormatter:
    """Formatting helpers for the crypto bot's cards and status text."""

    @staticmethod
    def format_usd(value: float) -> str:
        """Currency style with two decimals, e.g. 65000 -> '$65,000.00'."""
        sign = '-' if value < 0 else ''
        return f"{sign}${abs(value):,.2f}"

    @staticmethod
    def format_number(value: float) -> str:
        """
        Grouped number with up to three decimals and no trailing zeros,
        e.g. 65000 -> '65,000', 100.5 -> '100.5'.
        """
        text = f"{value:,.3f}"
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        return '0' if text == '-0' else text

    @staticmethod
    def format_change(percent: float) -> str:
        """Arrow plus two-decimal magnitude, e.g. -1.5 -> '▼ 1.50%'."""
        arrow = '▲' if percent > 0 else '▼'
        return f"{arrow} {abs(percent):.2f}%"

    @staticmethod
    def format_market_cap(value: float) -> str:
        """Whole dollars rounded half-up, e.g. 1.2e12 -> '$1,200,000,000,000'."""
        return f"${int(math.floor(value + 0.5)):,}"

    @staticmethod
    def currency_name(symbol: str) -> str:
        return CURRENCY_NAMES.get(symbol.upper(), symbol.upper())

    @staticmethod
    def presence_text(record: PriceRecord) -> str:
        return f"{record.symbol}: {CryptoFormatter.format_usd(record.price_usd)}"

    @staticmethod
    def help_text(prefix: str) -> str:
        return config.MESSAGES['help'].format(prefix=prefix)

    @staticmethod
    def news_embed(article: ArticleRecord) -> discord.Embed:
        """Card for one news article: linked title, source, publish time and domain."""
        embed = discord.Embed(
            title=article.title[:256],
            url=article.url,
            description=f"Source: {article.source_title}",
            color=config.EMBED_COLOR,
            timestamp=article.published_at,
        )
        if article.domain:
            embed.set_footer(text=article.domain, icon_url=config.FOOTER_ICON_URL)
        return embed

    @staticmethod
    def price_embed(record: PriceRecord, timestamp: Optional[datetime] = None) -> discord.Embed:
        embed = discord.Embed(
            title=f"{CryptoFormatter.currency_name(record.symbol)} Price",
            color=config.EMBED_COLOR,
            timestamp=timestamp or datetime.now(timezone.utc),
        )
        embed.add_field(name='USD', value=f"${CryptoFormatter.format_number(record.price_usd)}", inline=True)
        embed.add_field(name='24h Change', value=CryptoFormatter.format_change(record.percent_change_24h), inline=True)
        embed.add_field(name='Market Cap', value=CryptoFormatter.format_market_cap(record.market_cap_usd), inline=True)
        return embed

"""Tests for price/news formatting."""

from datetime import datetime, timezone

import pytest

import config
from crypto_formatter import CryptoFormatter
from crypto_models import ArticleRecord, PriceRecord


class TestNumberFormatting:

    @pytest.mark.parametrize('value, expected', [
        (65000, '$65,000.00'),
        (100.5, '$100.50'),
        (0.1234, '$0.12'),
        (-5, '-$5.00'),
    ])
    def test_format_usd(self, value, expected):
        assert CryptoFormatter.format_usd(value) == expected

    @pytest.mark.parametrize('value, expected', [
        (65000, '65,000'),
        (65000.5, '65,000.5'),
        (1234.56789, '1,234.568'),
        (0, '0'),
    ])
    def test_format_number(self, value, expected):
        assert CryptoFormatter.format_number(value) == expected

    @pytest.mark.parametrize('value, expected', [
        (-1.5, '▼ 1.50%'),
        (2.5, '▲ 2.50%'),
        (0, '▼ 0.00%'),
    ])
    def test_format_change(self, value, expected):
        assert CryptoFormatter.format_change(value) == expected

    def test_format_market_cap_rounds_half_up(self):
        assert CryptoFormatter.format_market_cap(1.2e12) == '$1,200,000,000,000'
        assert CryptoFormatter.format_market_cap(2.5) == '$3'
        assert CryptoFormatter.format_market_cap(1234.4) == '$1,234'


class TestEmbeds:

    def test_presence_text(self):
        record = PriceRecord(symbol='BTC', price_usd=100.5)
        assert CryptoFormatter.presence_text(record) == 'BTC: $100.50'

    def test_help_text_uses_prefix(self):
        text = CryptoFormatter.help_text('!crypto')
        assert text.startswith('**Crypto Bot Commands**')
        assert '`!crypto price`' in text
        assert '`!crypto news`' in text

    def test_price_embed(self):
        record = PriceRecord(symbol='BTC', price_usd=65000, percent_change_24h=-1.5, market_cap_usd=1.2e12)
        embed = CryptoFormatter.price_embed(record)

        assert embed.title == 'Bitcoin Price'
        assert embed.color.value == config.EMBED_COLOR
        assert [(f.name, f.value, f.inline) for f in embed.fields] == [
            ('USD', '$65,000', True),
            ('24h Change', '▼ 1.50%', True),
            ('Market Cap', '$1,200,000,000,000', True),
        ]
        assert embed.timestamp is not None

    def test_news_embed(self):
        published = datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
        article = ArticleRecord(
            id=1,
            title='ETF approved',
            url='https://example.com/etf',
            published_at=published,
            source_title='CoinDesk',
            domain='coindesk.com',
        )
        embed = CryptoFormatter.news_embed(article)

        assert embed.title == 'ETF approved'
        assert embed.url == 'https://example.com/etf'
        assert embed.description == 'Source: CoinDesk'
        assert embed.timestamp == published
        assert embed.footer.text == 'coindesk.com'
        assert embed.footer.icon_url == config.FOOTER_ICON_URL
        assert embed.color.value == 0xF7931A

    def test_news_embed_without_timestamp(self):
        article = ArticleRecord(1, 'Title', 'https://example.com', None, 'Source', '')
        embed = CryptoFormatter.news_embed(article)
        assert embed.timestamp is None
        assert embed.footer.text is None

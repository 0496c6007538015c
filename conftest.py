import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bot_context import BotContext
from config import BotConfig
from news_ledger import NewsLedger

NEWS_CHANNEL_ID = 123456789012345678


def make_news_item(item_id, title=None):
    return {
        'id': item_id,
        'title': title or f"Bitcoin story {item_id}",
        'url': f"https://example.com/news/{item_id}",
        'published_at': '2024-03-01T12:30:00Z',
        'source': {'title': 'CoinDesk', 'domain': 'coindesk.com'},
        'domain': 'coindesk.com',
    }


@pytest.fixture
def bot_config():
    return BotConfig(
        discord_token='x' * 60,
        news_channel_id=NEWS_CHANNEL_ID,
        cryptopanic_api_key='k' * 40,
    )


@pytest.fixture
def mock_api():
    api = MagicMock()
    api.get_posts = AsyncMock(return_value=[])
    api.get_currency = AsyncMock(return_value=[])
    return api


@pytest.fixture
def context(bot_config, mock_api):
    return BotContext(
        config=bot_config,
        api=mock_api,
        ledger=NewsLedger(capacity=bot_config.max_stored_news_ids),
    )

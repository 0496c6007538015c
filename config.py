"""
Crypto bot configuration using environment variables and .env file support.

Values from the .env file take precedence over system environment variables.
Nothing here is global state: call load_config() once at startup and pass the
resulting BotConfig to whatever needs it.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from logging_config import logger

# Load environment variables from .env file if it exists
load_dotenv(override=True)

# Defaults
DEFAULT_BASE_URL = 'https://cryptopanic.com/api/v1'
DEFAULT_CURRENCY = 'BTC'
DEFAULT_NEWS_KIND = 'news'
DEFAULT_NEWS_FILTER = 'important'
DEFAULT_PRICE_UPDATE_MINUTES = 5
DEFAULT_NEWS_UPDATE_HOURS = 2
DEFAULT_NEWS_POSTS_PER_UPDATE = 3
DEFAULT_MAX_STORED_NEWS_IDS = 100
DEFAULT_COMMAND_PREFIX = '!crypto'
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

# Bitcoin orange
EMBED_COLOR = 0xF7931A
FOOTER_ICON_URL = 'https://bitcoin.org/img/icons/opengraph.png'

# User-facing messages
MESSAGES = {
    'help': (
        '**Crypto Bot Commands**\n'
        '• `{prefix} help` - Show this help message\n'
        '• `{prefix} price` - Get the current Bitcoin price\n'
        '• `{prefix} news` - Get the latest crypto news'
    ),
    'news': "Check out the latest crypto news in <#{channel_id}>!",
    'price_unavailable': "Sorry, I couldn't fetch the current Bitcoin price.",
}


@dataclass(frozen=True)
class BotConfig:
    """Immutable bot settings, built once by load_config()."""

    discord_token: str
    news_channel_id: int
    cryptopanic_api_key: str
    cryptopanic_base_url: str = DEFAULT_BASE_URL
    currency: str = DEFAULT_CURRENCY
    news_kind: str = DEFAULT_NEWS_KIND
    news_filter: str = DEFAULT_NEWS_FILTER
    price_update_minutes: float = DEFAULT_PRICE_UPDATE_MINUTES
    news_update_hours: int = DEFAULT_NEWS_UPDATE_HOURS
    news_posts_per_update: int = DEFAULT_NEWS_POSTS_PER_UPDATE
    max_stored_news_ids: int = DEFAULT_MAX_STORED_NEWS_IDS
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS


def _require(env, name):
    value = env.get(name)
    if not value:
        raise ValueError(f"{name} environment variable is required")
    return value


def _number(env, name, default, cast):
    """Parse an optional numeric variable, falling back to the default on bad input."""
    raw = env.get(name)
    if raw is None or str(raw).strip() == '':
        return default
    try:
        return cast(raw)
    except (ValueError, TypeError):
        logger.warning(f"Invalid {name} ('{raw}'), using default {default}.")
        return default


def load_config(env=None) -> BotConfig:
    """
    Build a BotConfig from the environment.

    Args:
        env: Optional mapping read instead of os.environ

    Returns:
        BotConfig: The loaded configuration

    Raises:
        ValueError: If a required variable is missing or NEWS_CHANNEL_ID is not a number
    """
    if env is None:
        env = os.environ

    # Discord Bot Token (required)
    # Environment variable: DISCORD_TOKEN
    discord_token = _require(env, 'DISCORD_TOKEN')

    # Channel that receives news posts (required)
    # Environment variable: NEWS_CHANNEL_ID
    raw_channel_id = _require(env, 'NEWS_CHANNEL_ID')
    try:
        news_channel_id = int(raw_channel_id)
    except ValueError:
        raise ValueError(f"NEWS_CHANNEL_ID must be an integer, got '{raw_channel_id}'")

    # CryptoPanic API key (required)
    # Environment variable: CRYPTOPANIC_API_KEY
    cryptopanic_api_key = _require(env, 'CRYPTOPANIC_API_KEY')

    return BotConfig(
        discord_token=discord_token,
        news_channel_id=news_channel_id,
        cryptopanic_api_key=cryptopanic_api_key,
        cryptopanic_base_url=env.get('CRYPTOPANIC_BASE_URL', DEFAULT_BASE_URL).rstrip('/'),
        currency=env.get('CRYPTO_CURRENCY', DEFAULT_CURRENCY).upper(),
        news_kind=env.get('NEWS_KIND', DEFAULT_NEWS_KIND),
        news_filter=env.get('NEWS_FILTER', DEFAULT_NEWS_FILTER),
        price_update_minutes=_number(env, 'PRICE_UPDATE_MINUTES', DEFAULT_PRICE_UPDATE_MINUTES, float),
        news_update_hours=_number(env, 'NEWS_UPDATE_HOURS', DEFAULT_NEWS_UPDATE_HOURS, int),
        news_posts_per_update=_number(env, 'NEWS_POSTS_PER_UPDATE', DEFAULT_NEWS_POSTS_PER_UPDATE, int),
        max_stored_news_ids=_number(env, 'MAX_STORED_NEWS_IDS', DEFAULT_MAX_STORED_NEWS_IDS, int),
        command_prefix=env.get('COMMAND_PREFIX', DEFAULT_COMMAND_PREFIX),
        request_timeout_seconds=_number(env, 'REQUEST_TIMEOUT_SECONDS', DEFAULT_REQUEST_TIMEOUT_SECONDS, float),
    )

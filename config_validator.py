from dataclasses import replace

import config as config_module
from config import BotConfig
from logging_config import logger

# Numeric settings that must be positive, with the default used when they aren't
_POSITIVE_SETTINGS = {
    'price_update_minutes': config_module.DEFAULT_PRICE_UPDATE_MINUTES,
    'news_update_hours': config_module.DEFAULT_NEWS_UPDATE_HOURS,
    'news_posts_per_update': config_module.DEFAULT_NEWS_POSTS_PER_UPDATE,
    'max_stored_news_ids': config_module.DEFAULT_MAX_STORED_NEWS_IDS,
    'request_timeout_seconds': config_module.DEFAULT_REQUEST_TIMEOUT_SECONDS,
}

def validate_config(config: BotConfig) -> BotConfig:
    """
    Validate a loaded BotConfig.

    Args:
        config: The configuration returned by config.load_config()

    Returns:
        BotConfig: The configuration, with invalid optional values replaced by defaults

    Raises:
        ValueError: If critical configuration is invalid or missing
    """
    # Check Discord token
    if not config.discord_token:
        logger.error("Discord token not found in environment or is empty")
        raise ValueError("DISCORD_TOKEN is missing or empty")

    if len(config.discord_token) < 50:
        # Token length can vary, so only warn
        logger.warning("Discord token appears to be invalid (too short).")

    # Check CryptoPanic API key
    if not config.cryptopanic_api_key:
        logger.error("CryptoPanic API key not found in environment or is empty")
        raise ValueError("CRYPTOPANIC_API_KEY is missing or empty")

    if len(config.cryptopanic_api_key) < 20:
        logger.warning("CryptoPanic API key appears to be invalid (too short).")

    if config.news_channel_id <= 0:
        logger.error(f"Invalid NEWS_CHANNEL_ID: {config.news_channel_id}")
        raise ValueError("NEWS_CHANNEL_ID must be a positive Discord channel ID")

    corrections = {}
    for name, default in _POSITIVE_SETTINGS.items():
        value = getattr(config, name)
        if value <= 0:
            logger.warning(f"{name} in config ('{value}') must be positive. Using default {default}.")
            corrections[name] = default

    # The news schedule runs on hour boundaries within a day
    hours = corrections.get('news_update_hours', config.news_update_hours)
    if hours > 24:
        logger.warning(f"news_update_hours ({hours}) is longer than a day. Using 24.")
        corrections['news_update_hours'] = 24

    if not config.command_prefix.strip():
        logger.warning(f"command_prefix is empty. Using default '{config_module.DEFAULT_COMMAND_PREFIX}'.")
        corrections['command_prefix'] = config_module.DEFAULT_COMMAND_PREFIX

    if not config.news_filter:
        logger.info("No news filter configured. All news items will be considered.")

    if corrections:
        config = replace(config, **corrections)

    logger.info(
        f"Tracking {config.currency}: price every {config.price_update_minutes:g} min, "
        f"news every {config.news_update_hours}h ({config.news_posts_per_update} posts per update)"
    )
    return config

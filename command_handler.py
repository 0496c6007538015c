import discord
from logging_config import logger
from bot_context import BotContext
from crypto_formatter import CryptoFormatter
from price_fetcher import fetch_price
import config as config_module
from typing import Optional

def parse_command(content: str, prefix: str) -> Optional[str]:
    """Return the trimmed text after `prefix`, or None if the message doesn't start with it."""
    if not content or not content.startswith(prefix):
        return None
    return content[len(prefix):].strip()

async def handle_crypto_command(message: discord.Message, client_user: discord.ClientUser, context: BotContext) -> bool:
    """
    Handle `!crypto <command>` messages.

    Args:
        message: The incoming message
        client_user: The bot's own user, used to ignore its own messages
        context: Shared bot state

    Returns:
        bool: True if a reply was sent
    """
    # Ignore our own messages and other bots
    if message.author == client_user or message.author.bot:
        return False

    prefix = context.config.command_prefix
    command = parse_command(message.content, prefix)
    if command is None:
        return False

    if command == 'help':
        logger.info(f"Executing command: help - Requested by {message.author}")
        return await _reply(message, CryptoFormatter.help_text(prefix))

    if command == 'price':
        return await handle_price_command(message, context)

    if command == 'news':
        logger.info(f"Executing command: news - Requested by {message.author}")
        text = config_module.MESSAGES['news'].format(channel_id=context.config.news_channel_id)
        return await _reply(message, text)

    logger.debug(f"Ignoring unknown command '{command}' from {message.author}")
    return False

async def handle_price_command(message: discord.Message, context: BotContext) -> bool:
    """Reply with a price card, or an apology if the price can't be fetched."""
    logger.info(f"Executing command: price - Requested by {message.author}")

    try:
        record = await fetch_price(context.api, context.config.currency)
        if record is None:
            return await _reply(message, config_module.MESSAGES['price_unavailable'])
        embed = CryptoFormatter.price_embed(record)
    except Exception as e:
        logger.error(f"Error fetching price for command: {e}", exc_info=True)
        return await _reply(message, config_module.MESSAGES['price_unavailable'])

    return await _reply(message, embed=embed)

async def _reply(message: discord.Message, content: Optional[str] = None, embed: Optional[discord.Embed] = None) -> bool:
    try:
        allowed_mentions = discord.AllowedMentions(everyone=False, roles=False, users=True)
        await message.reply(content=content, embed=embed, allowed_mentions=allowed_mentions)
        return True
    except discord.HTTPException as e:
        logger.warning(f"Failed to reply to message {message.id}: {e}")
        return False

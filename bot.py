# This bot requires the 'message_content' intent.

import discord
from typing import Optional

from logging_config import logger
from bot_context import BotContext, create_context
from command_handler import handle_crypto_command
from config_validator import validate_config
from crypto_tasks import CryptoTasks

class CryptoBot(discord.Client):
    """Discord client that posts crypto news, shows the BTC price and answers !crypto commands."""

    def __init__(self, context: BotContext, intents: Optional[discord.Intents] = None):
        if intents is None:
            intents = discord.Intents.default()
            intents.message_content = True  # Required to read command text in guild channels
        super().__init__(intents=intents)
        self.context = context
        self.crypto_tasks = CryptoTasks(self, context)

    async def on_ready(self):
        logger.info(f'Bot has successfully connected as {self.user}')
        logger.info(f'Bot ID: {self.user.id}')
        logger.info(f'Connected to {len(self.guilds)} guilds')

        # on_ready fires again after reconnects; start() ignores loops already running
        self.crypto_tasks.start()

    async def on_message(self, message: discord.Message):
        try:
            await handle_crypto_command(message, self.user, self.context)
        except Exception as e:
            logger.error(f"Error handling message {message.id}: {str(e)}", exc_info=True)

    async def on_error(self, event, *args, **kwargs):
        """Log Discord API errors; never exit."""
        logger.error(f'Discord error in {event}', exc_info=True)
        if args:
            logger.error(f'Error context args: {args}')
        if kwargs:
            logger.error(f'Error context kwargs: {kwargs}')

    async def close(self):
        self.crypto_tasks.stop()
        await super().close()

def main():
    try:
        logger.info("Starting bot...")
        import config

        bot_config = validate_config(config.load_config())

        # Log startup (but mask the actual token)
        token = bot_config.discord_token
        token_preview = token[:5] + "..." + token[-5:] if len(token) > 10 else "***masked***"
        logger.info(f"Bot token loaded: {token_preview}")
        logger.info("Connecting to Discord...")

        bot = CryptoBot(create_context(bot_config))
        # log_handler=None keeps discord.py from replacing our logging setup
        bot.run(token, log_handler=None)
    except ValueError as e:
        logger.critical(f"Invalid configuration: {e}")
        logger.error("Set DISCORD_TOKEN, NEWS_CHANNEL_ID and CRYPTOPANIC_API_KEY in the environment or a .env file.")
    except discord.LoginFailure:
        logger.critical("Invalid Discord token. Please check DISCORD_TOKEN", exc_info=True)
    except Exception as e:
        logger.critical(f"Unexpected error during bot startup: {e}", exc_info=True)

if __name__ == '__main__':
    main()

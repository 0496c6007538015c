import logging
import os
from datetime import datetime

LOG_DIRECTORY = "logs"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level_name=None):
    """
    Sets up logging for the crypto bot: one timestamped file per run plus the console.

    Args:
        level_name (str): Log level name; defaults to the LOG_LEVEL env var or INFO

    Returns:
        logging.Logger: The 'crypto_bot' logger
    """
    level_name = (level_name or os.getenv('LOG_LEVEL') or 'INFO').upper()
    level = getattr(logging, level_name, logging.INFO)

    os.makedirs(LOG_DIRECTORY, exist_ok=True)
    log_filename = f"{LOG_DIRECTORY}/bot_{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_filename),
            logging.StreamHandler()
        ]
    )
    # discord.py logs every gateway event at INFO
    logging.getLogger('discord').setLevel(max(level, logging.WARNING))

    return logging.getLogger('crypto_bot')

# Initialize logger when this module is imported
logger = setup_logging()

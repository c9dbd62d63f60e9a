import logging
import os
import sys
from datetime import datetime

import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=None, log_to_file=None):
    """Sets up logging for statchart with proper Unicode support."""
    level = (level or config.log_level).upper()
    if log_to_file is None:
        log_to_file = config.log_to_file

    handlers = []

    if log_to_file:
        log_directory = config.log_directory
        if not os.path.exists(log_directory):
            os.makedirs(log_directory)

        # Create a unique log file name with timestamp
        log_filename = os.path.join(
            log_directory, f"statchart_{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"
        )
        handlers.append(logging.FileHandler(log_filename, encoding='utf-8'))

    # For console handler, handle encoding issues on Windows
    if sys.platform.startswith('win'):
        try:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.stream.reconfigure(encoding='utf-8')
        except (AttributeError, OSError):
            console_handler = logging.StreamHandler(sys.stdout)
    else:
        console_handler = logging.StreamHandler()
    handlers.append(console_handler)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    logger = logging.getLogger('statchart')
    logger.debug("Logging configured at %s (file logging: %s)", level, log_to_file)
    return logger

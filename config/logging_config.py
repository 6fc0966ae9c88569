"""
Logging configuration for the enrollment dashboard.
Centralizes all logging setup so every module can use logging.getLogger(__name__).
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from config.settings import LOG_DIR, LOG_LEVEL

# Constants
LOG_FILE = os.path.join(LOG_DIR, "enrollment_dashboard.log")
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Streamlit reruns the script on every interaction, so identical lines arrive in bursts
DUPLICATE_WINDOW_SECONDS = 0.1

class DuplicateFilter(logging.Filter):
    """Drop a rendered message repeated by the same logger within the window."""

    def __init__(self, name='', window=DUPLICATE_WINDOW_SECONDS, clock=time.monotonic):
        super().__init__(name)
        self.window = window
        self.clock = clock
        self._last = None
        self._last_at = 0.0

    def filter(self, record):
        key = (record.name, record.levelno, record.getMessage())
        now = self.clock()

        if key == self._last and now - self._last_at < self.window:
            return False

        self._last = key
        self._last_at = now
        return True

def setup_logging(level=None):
    """
    Set up root logging for the dashboard.

    Args:
        level: Optional level name overriding LOG_LEVEL

    Returns:
        The configured root logger
    """
    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger()

    # Only configure if handlers haven't been added yet
    if logger.handlers:
        return logger

    logger.setLevel(level or LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(DuplicateFilter())
    logger.addHandler(console_handler)

    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        # delay=True avoids opening the file until the first message
        file_handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            delay=True
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(DuplicateFilter())
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not set up file logging: {e}")

    return logger

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from envelope import config

# Define log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logger(name: str = "envelope", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a standard logger for the package.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    # Avoid duplicate handlers if setup_logger is called multiple times
    if not logger.handlers:
        # Stream Handler (Console)
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)

        # File Handler (only when a path is configured)
        log_file = log_file or config.LOG_FILE_PATH
        if log_file:
            try:
                file_handler = RotatingFileHandler(log_file, maxBytes=10*1024*1024, backupCount=5)
                file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.addHandler(file_handler)
            except OSError as e:
                logger.warning(f"Could not setup file logging: {e}")

    return logger

# Global package logger
logger = setup_logger()

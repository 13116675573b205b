import os
import logging
from datetime import datetime

from seg_viewer.config import settings

LOGGER_NAME = "seg_viewer"

def setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    # Importing twice (or calling again from the CLI) must not double every line
    if logger.handlers:
        return logger

    formatter = logging.Formatter('{"timestamp": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_to_file:
        os.makedirs(settings.log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file = os.path.join(settings.log_dir, f"seg_viewer_{timestamp}.log")

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

def set_console_level(level: int) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(logger.level, level))
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)

logger = setup_logger()

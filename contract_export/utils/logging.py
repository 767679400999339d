import logging
import sys
from pathlib import Path

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(log_level: str = "WARNING", log_file: str = None):
    """Configure the root logger for the exporter.

    The console gets short ``LEVEL: message`` lines on stderr, keeping stdout
    for the result line. DEBUG switches the console to the detailed format;
    the log file always uses it.
    """
    level = getattr(logging, log_level.upper())

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        DETAILED_FORMAT if level <= logging.DEBUG else CONSOLE_FORMAT
    ))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        logger.addHandler(file_handler)

    return logger

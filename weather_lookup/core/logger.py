"""
Logging management module.
"""
import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str = "weather_lookup",
    level: str = "WARNING",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Setup and configure logger.

    Records go to stderr; stdout is left to the program's own output.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = False

    log_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(log_level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "weather_lookup") -> logging.Logger:
    """
    Get logger instance. Child names are placed under the package logger.
    """
    if name != "weather_lookup" and not name.startswith("weather_lookup."):
        name = f"weather_lookup.{name}"
    return logging.getLogger(name)

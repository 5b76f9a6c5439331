"""Logging configuration."""
import logging
import os
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Optional[str] = None) -> str:
    return (level or os.getenv("LOG_LEVEL", "INFO")).upper()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

"""Logging configuration for the command-line entry point."""

import logging

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging so every component logger shows up on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

"""
Logging setup - rich console output plus an optional log file.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(config: LoggingConfig, console: Console = None) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        config: Level name and optional log file path
        console: Console for the rich handler (defaults to stderr)

    Returns:
        The configured root logger
    """
    level = getattr(logging, config.level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers from an earlier call
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(rich_handler)

    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    return root

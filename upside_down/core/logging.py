"""
Logging configuration module for the game.

Provides centralized logging setup with colored output using rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.

    """
    # Logs go to stderr, the game prompts to stdout.
    console = Console(width=120, stderr=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )

    rich_handler.setFormatter(
        logging.Formatter(
            "%(name)s - %(message)s",
            datefmt="[%X]",
        )
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )

    # prompt_toolkit is chatty at DEBUG level.
    logging.getLogger("asyncio").setLevel(logging.WARNING)


"""Unified logging for gqlform with CLI output support."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class FormLogger(logging.Logger):
    """
    Logger that combines Python logging with a few CLI formatting methods.

    Provides the standard logging levels (debug, info, warning, error, critical)
    plus the semantic output helpers success and key_value.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the gqlform logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """Print a plain message (with Rich markup support)."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """Print a success message in green with a checkmark icon."""
        self.print(f"[green]✓[/green] {message}")

    def key_value(self, key: str, value: Any, key_style: str = "dim") -> None:
        """
        Print a formatted key-value pair, e.g. "Form: createUser".

        Args:
            key: The key/label to display
            value: The value to display
            key_style: Style for the key (default: "dim")
        """
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")


def get_logger(name: str = "gqlform") -> FormLogger:
    """
    Get or create a gqlform logger instance.

    Args:
        name: Logger name (default: "gqlform")

    Returns:
        FormLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(FormLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    if not isinstance(logger, FormLogger):
        raise TypeError(f"Logger '{name}' was created before gqlform configured its logger class")

    return logger

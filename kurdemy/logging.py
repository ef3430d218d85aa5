"""Shared console and logger for the kurdemy tool."""

import logging

from rich.console import Console

CONSOLE = Console()

LOGGER = logging.getLogger("kurdemy")


def configure_logging(verbose: bool = False) -> None:
    """Route diagnostic logging to stderr, DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

"""Logging setup for the command line entrypoint."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: int | str = "INFO") -> None:
    """Install a rich console handler on the root logger once.

    Does nothing when the application already configured a handler.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )

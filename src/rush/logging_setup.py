"""Logging setup for the rush command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: int | str = logging.WARNING,
    console: Console | None = None,
    show_time: bool = False,
) -> None:
    """Route log records through a Rich handler.

    Replaces any handlers previously installed on the root logger, so it
    is safe to call more than once.

    Args:
        level: Root logger level, as a number or a level name.
        console: Console to write to. Defaults to stderr.
        show_time: Whether to prefix records with a timestamp.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console or Console(stderr=True),
                show_time=show_time,
                show_path=False,
            )
        ],
        force=True,
    )

"""Logging setup for the scrobblewatch CLI."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Route log records to stderr with a timestamped one-line format.

    Does nothing when the root logger already has handlers, unless ``force`` is set, so
    an embedding host (or pytest) keeps its own logging setup.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )

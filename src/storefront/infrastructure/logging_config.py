"""Logging setup for the command line."""

from __future__ import annotations

import logging
import os

import click

LOG_LEVEL_ENV = "STOREFRONT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Writes records through ``click.echo`` to whatever stderr is current."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def resolve_level(verbose: bool = False) -> int:
    """``--verbose`` wins; otherwise the environment, otherwise WARNING."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int) -> None:
    root = logging.getLogger("storefront")
    root.setLevel(level)
    if not any(isinstance(h, ClickEchoHandler) for h in root.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

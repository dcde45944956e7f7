from __future__ import annotations
"""Rich-backed logger for optionette.

The library only emits DEBUG records on the ``"optionette"`` logger and
never installs handlers by itself; :func:`configure` wires a
:class:`rich.logging.RichHandler` (the CLI calls it on start-up).
"""
from logging import DEBUG, ERROR, INFO, WARNING, Logger, getLogger

from rich.console import Console
from rich.logging import RichHandler

console = Console()

__all__ = ["console", "configure", "get", "log"]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("optionette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger with *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    log.setLevel(lvl)
    return log


def configure(level: str = "info") -> Logger:
    """Attach a RichHandler to the package logger (idempotent)."""
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=console, rich_tracebacks=True, markup=True))
        log.propagate = False
    return get(level)

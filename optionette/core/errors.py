from __future__ import annotations
"""Error raised when a value is requested from an empty Optional."""

__all__ = ["EmptyValueError", "DEFAULT_UNWRAP_MESSAGE"]

DEFAULT_UNWRAP_MESSAGE = "unwrap called on empty Optional"


class EmptyValueError(ValueError):  # noqa: D101
    def __init__(self, message: str = DEFAULT_UNWRAP_MESSAGE):
        super().__init__(message)
        self.message = message

from __future__ import annotations
"""Result of a non-raising extraction from an Optional.

``Optional.to_result`` returns one of these instead of raising
:class:`EmptyValueError`, so absence can travel through a pipeline as data
and be inspected (``res.ok``, ``res.error``) or re-raised later.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from optionette.core.option import Optional as Opt

T = TypeVar("T")

__all__ = ["Result"]


@dataclass(slots=True)
class Result(Generic[T]):  # noqa: D101
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    # Constructors ------------------------------------------------------- #
    @staticmethod
    def success(val: T) -> "Result[T]":
        return Result(value=val)

    @staticmethod
    def failure(err: Exception) -> "Result[T]":
        return Result(error=err)

    # Extraction --------------------------------------------------------- #
    def unwrap(self) -> T:  # noqa: D401
        """Return *value*, re-raising the stored *error* on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, fallback: T) -> T:
        return fallback if self.error is not None else self.value  # type: ignore[return-value]

    def to_optional(self) -> "Opt[T]":
        """Back to an Optional: Full(value) on success, Empty() on failure."""
        from optionette.core.option import Empty, Full

        return Full(self.value) if self.error is None else Empty()

from __future__ import annotations
"""Mutable alias into an Optional's storage.

``insert`` and the ``get_or_insert*`` family hand back a :class:`Ref`
instead of the bare value so that writes land in the container::

    opt = Empty(int)
    ref = opt.insert(5)
    ref += 2
    assert opt == Full(7)

A Ref stays bound to the container that issued it.  Only one writer at a
time: do not mutate the container through another path (``take``,
``replace``, a second Ref) while you still write through this one.
Writing after the container was emptied raises :class:`EmptyValueError`.
"""
import operator
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from optionette.core.errors import EmptyValueError

if TYPE_CHECKING:  # pragma: no cover
    from optionette.core.option import Optional

T = TypeVar("T")

__all__ = ["Ref"]


class Ref(Generic[T]):  # noqa: D101
    __slots__ = ("_owner",)

    def __init__(self, owner: "Optional[T]"):
        self._owner = owner

    # Access -------------------------------------------------------------- #
    @property
    def value(self) -> T:
        return self._owner._value

    @value.setter
    def value(self, new_value: T) -> None:
        if not self._owner._present:
            raise EmptyValueError("write through Ref into an empty Optional")
        self._owner._value = new_value

    def get(self) -> T:
        return self.value

    def set(self, new_value: T) -> None:
        self.value = new_value

    def update(self, func: Callable[[T], T]) -> T:
        """Replace the aliased value with ``func(value)`` and return it."""
        self.value = func(self.value)
        return self.value

    # In-place operators write back into the owner ------------------------ #
    def _apply(self, op: Callable[[Any, Any], Any], other: Any) -> "Ref[T]":
        self.value = op(self.value, other)
        return self

    def __iadd__(self, other: Any) -> "Ref[T]":
        return self._apply(operator.iadd, other)

    def __isub__(self, other: Any) -> "Ref[T]":
        return self._apply(operator.isub, other)

    def __imul__(self, other: Any) -> "Ref[T]":
        return self._apply(operator.imul, other)

    # ------------------------------------------------------------------ #
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Ref):
            other = other.value
        return self.value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"

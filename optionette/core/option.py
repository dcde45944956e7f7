from __future__ import annotations
"""Optional container: a value that is either present (Full) or absent (Empty).

Build instances with :func:`Full` / :func:`Empty` (or :func:`from_nullable`)
rather than calling the class directly.

Two families of operations:

* combinators (``map``, ``and_then``, ``filter``, ``or_`` ...) never touch the
  receiver and return new containers or plain values;
* mutators (``insert``, ``get_or_insert*``, ``take``, ``replace``) change the
  receiver in place.  The insert family returns a :class:`Ref` aliasing the
  stored value, ``take``/``replace`` return the previous state.
"""
import copy as _copy
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

from optionette.core.errors import DEFAULT_UNWRAP_MESSAGE, EmptyValueError
from optionette.core.ref import Ref
from optionette.core.result import Result
from optionette.utils.defaults import zero_value
from optionette.utils.logging import log

T = TypeVar("T")
U = TypeVar("U")

__all__ = ["Optional", "Full", "Empty", "from_nullable"]


class Optional(Generic[T]):
    """Container holding at most one value of type ``T``.

    ``_type`` remembers the value type (from ``Full(value)`` or
    ``Empty(tp)``) so that default-producing operations know which zero
    value to build.  It may be ``None`` when unknown.

    Build instances with :func:`Full` / :func:`Empty`; the constructor
    takes the raw state and requires *present* to be given explicitly.
    """

    __slots__ = ("_value", "_present", "_type")

    def __init__(self, value: Any, present: bool, tp: Union[type, None] = None):
        self._value = value if present else None
        self._present = present
        self._type = tp

    # ------------------------------------------------------------------ #
    # Inspection
    # ------------------------------------------------------------------ #
    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    def is_present_and(self, predicate: Callable[[T], bool]) -> bool:
        """True when present and *predicate* accepts the contained value."""
        return self._present and bool(predicate(self._value))

    def copy(self) -> "Optional[T]":
        """Return a deep, fully independent copy."""
        return _copy.deepcopy(self)

    def __copy__(self) -> "Optional[T]":
        return Optional(self._value, self._present, self._type)

    def __deepcopy__(self, memo: dict) -> "Optional[T]":
        return Optional(_copy.deepcopy(self._value, memo), self._present, self._type)

    # ------------------------------------------------------------------ #
    # Extraction
    # ------------------------------------------------------------------ #
    def expect(self, message: str) -> T:
        """Return the value or raise :class:`EmptyValueError` with *message*."""
        if not self._present:
            log.debug("expect failed: %s", message)
            raise EmptyValueError(message)
        return self._value

    def unwrap(self) -> T:
        return self.expect(DEFAULT_UNWRAP_MESSAGE)

    def unwrap_or(self, fallback: T) -> T:
        return self._value if self._present else fallback

    def unwrap_or_else(self, fallback_fn: Callable[[], T]) -> T:
        """Return the value, calling *fallback_fn* only when absent."""
        if self._present:
            return self._value
        return fallback_fn()

    def unwrap_or_default(self) -> T:
        """Return the value, or the zero value of ``T`` when absent.

        The zero value comes from :mod:`optionette.utils.defaults`; with no
        known type it is ``None``.
        """
        if self._present:
            return self._value
        return zero_value(self._type)

    def to_nullable(self) -> Union[T, None]:
        return self._value if self._present else None

    def to_result(self, message: Union[str, None] = None) -> Result[T]:
        """Non-raising form of :meth:`expect` / :meth:`unwrap`."""
        if self._present:
            return Result.success(self._value)
        return Result.failure(EmptyValueError(message or DEFAULT_UNWRAP_MESSAGE))

    # ------------------------------------------------------------------ #
    # Transformation
    # ------------------------------------------------------------------ #
    def map(self, func: Callable[[T], U]) -> "Optional[U]":
        if not self._present:
            return Empty()
        return Full(func(self._value))

    def inspect(self, func: Callable[[T], Any]) -> "Optional[T]":
        """Call *func* with the value (if any) and return ``self`` unchanged."""
        if self._present:
            func(self._value)
        return self

    def map_or(self, fallback: U, func: Callable[[T], U]) -> U:
        return func(self._value) if self._present else fallback

    def map_or_else(self, fallback_fn: Callable[[], U], func: Callable[[T], U]) -> U:
        if self._present:
            return func(self._value)
        return fallback_fn()

    # ------------------------------------------------------------------ #
    # Combination
    # ------------------------------------------------------------------ #
    def and_(self, other: "Optional[U]") -> "Optional[U]":
        """Empty if ``self`` is absent, otherwise *other* as-is."""
        if not self._present:
            return Empty(other._type)
        return other

    def and_then(self, func: Callable[[T], "Optional[U]"]) -> "Optional[U]":
        """Monadic bind: Empty if absent, otherwise ``func(value)``."""
        if not self._present:
            return Empty()
        return func(self._value)

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        if self._present and predicate(self._value):
            return self
        return Empty(self._type)

    def or_(self, other: "Optional[T]") -> "Optional[T]":
        return self if self._present else other

    def or_else(self, func: Callable[[], "Optional[T]"]) -> "Optional[T]":
        """``self`` if present, otherwise the lazily computed ``func()``."""
        if self._present:
            return self
        return func()

    def xor(self, other: "Optional[T]") -> "Optional[T]":
        """The one present container if exactly one is present, else Empty."""
        if self._present and not other._present:
            return self
        if other._present and not self._present:
            return other
        return Empty(self._type or other._type)

    def flatten(self: "Optional[Optional[U]]") -> "Optional[U]":
        """Collapse one level of nesting."""
        if not self._present:
            return Empty()
        inner = self._value
        if not isinstance(inner, Optional):
            raise TypeError(f"flatten expects Optional[Optional[T]], found {type(inner).__name__} inside")
        return inner

    def contains(self, candidate: Any) -> bool:
        return self._present and self._value == candidate

    # ------------------------------------------------------------------ #
    # In-place mutation
    # ------------------------------------------------------------------ #
    def _fill(self, value: T) -> None:
        self._value = value
        self._present = True
        if value is not None:
            self._type = type(value)

    def insert(self, value: T) -> Ref[T]:
        """Overwrite the contents with *value* and return an alias to it."""
        if self._present:
            log.debug("insert discards %r", self._value)
        self._fill(value)
        return Ref(self)

    def get_or_insert(self, value: T) -> Ref[T]:
        if not self._present:
            self._fill(value)
        return Ref(self)

    def get_or_insert_default(self) -> Ref[T]:
        if not self._present:
            self._fill(zero_value(self._type))
        return Ref(self)

    def get_or_insert_with(self, func: Callable[[], T]) -> Ref[T]:
        """Like :meth:`get_or_insert` but *func* runs only when absent."""
        if not self._present:
            self._fill(func())
        return Ref(self)

    def take(self) -> "Optional[T]":
        """Move the contents out, leaving the receiver Empty."""
        taken = Optional(self._value, self._present, self._type)
        self._value = None
        self._present = False
        return taken

    def replace(self, new_value: T) -> "Optional[T]":
        """Store *new_value* and return the previous state."""
        old = Optional(self._value, self._present, self._type)
        self._fill(new_value)
        return old

    # ------------------------------------------------------------------ #
    # Dunder helpers
    # ------------------------------------------------------------------ #
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        if self._present != other._present:
            return False
        return not self._present or self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return self._present

    def __iter__(self) -> Iterator[T]:
        if self._present:
            yield self._value

    def __repr__(self) -> str:
        return f"Full({self._value!r})" if self._present else "Empty()"


# --------------------------------------------------------------------------- #
# Constructors
# --------------------------------------------------------------------------- #

def Full(value: T) -> Optional[T]:  # noqa: N802
    """Return a present container holding *value*."""
    return Optional(value, True, type(value) if value is not None else None)


def Empty(tp: Union[type, None] = None) -> Optional[Any]:  # noqa: N802
    """Return an absent container; *tp* names ``T`` for zero-value operations."""
    return Optional(None, False, tp)


def from_nullable(value: Union[T, None], tp: Union[type, None] = None) -> Optional[T]:
    """``None`` becomes Empty, anything else Full."""
    if value is None:
        return Empty(tp)
    return Full(value)

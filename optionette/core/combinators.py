from __future__ import annotations
"""Module-level combinators over :class:`Optional`.

Function forms of the Optional methods, handy where a plain callable is
needed (``functools.reduce(xor, opts)``, ``map(flatten, nested)``).
"""
from typing import Any, Callable, TypeVar

from optionette.core.option import Optional

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "map_",
    "map_or",
    "map_or_else",
    "and_",
    "and_then",
    "xor",
    "flatten",
    "contains",
]


def map_(opt: Optional[T], func: Callable[[T], U]) -> Optional[U]:  # noqa: D401
    """Apply *func* to the value of *opt*, keeping absence."""
    return opt.map(func)


def map_or(opt: Optional[T], fallback: U, func: Callable[[T], U]) -> U:
    return opt.map_or(fallback, func)


def map_or_else(opt: Optional[T], fallback_fn: Callable[[], U], func: Callable[[T], U]) -> U:
    return opt.map_or_else(fallback_fn, func)


def and_(a: Optional[T], b: Optional[U]) -> Optional[U]:
    return a.and_(b)


def and_then(opt: Optional[T], func: Callable[[T], Optional[U]]) -> Optional[U]:
    return opt.and_then(func)


def xor(a: Optional[T], b: Optional[T]) -> Optional[T]:
    return a.xor(b)


def flatten(opt: Optional[Optional[T]]) -> Optional[T]:
    return opt.flatten()


def contains(opt: Optional[T], candidate: Any) -> bool:
    """True iff *opt* is present and its value equals *candidate*."""
    return opt.contains(candidate)

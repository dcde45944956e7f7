from __future__ import annotations

"""Registry of zero-value factories.

Python has no built-in notion of "the zero value of T", so operations such
as :meth:`Optional.unwrap_or_default` resolve it here.  Built-in scalar and
container types are pre-registered; anything else falls back to calling the
type with no arguments.

Example
-------
```python
from decimal import Decimal
from optionette.utils.defaults import register_default, zero_value

register_default(Decimal, lambda: Decimal("0.00"))
zero_value(Decimal)  # Decimal('0.00')
```
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from optionette.utils.logging import log

# Public exports for `import *`
__all__ = [
    "register_default",
    "unregister_default",
    "zero_value",
    "registered_defaults",
]

Factory = Callable[[], Any]

_BUILTINS: Dict[type, Factory] = {
    int: int,
    float: float,
    complex: complex,
    bool: bool,
    str: str,
    bytes: bytes,
    list: list,
    dict: dict,
    set: set,
    tuple: tuple,
    frozenset: frozenset,
}

# Global in-memory store of factories, seeded with the builtins.
_REGISTRY: Dict[type, Factory] = dict(_BUILTINS)


def register_default(tp: type, factory: Factory) -> Factory:
    """Register *factory* as the zero-value producer for *tp*.

    Re-registering a type replaces the previous factory.
    """
    if not callable(factory):
        raise TypeError(f"Default factory for {tp!r} must be callable, got {factory!r}.")
    _REGISTRY[tp] = factory
    return factory


def unregister_default(tp: type) -> None:
    """Remove the factory registered for *tp* (builtins are restored)."""
    _REGISTRY.pop(tp, None)
    if tp in _BUILTINS:
        _REGISTRY[tp] = _BUILTINS[tp]


def zero_value(tp: Optional[type]) -> Any:  # noqa: D401
    """Return a fresh zero value for *tp*.

    * ``None`` (type unknown) -> ``None``
    * registered factory -> ``factory()``
    * otherwise -> ``tp()``, or ``None`` when *tp* needs constructor arguments
    """
    if tp is None:
        return None
    factory = _REGISTRY.get(tp)
    if factory is not None:
        return factory()
    try:
        return tp()
    except TypeError:
        log.debug("no default for %s and it needs constructor arguments; using None", tp.__name__)
        return None


def registered_defaults() -> Mapping[type, Factory]:
    """Return a read-only view of the registry."""
    return MappingProxyType(_REGISTRY)

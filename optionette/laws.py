from __future__ import annotations
"""Executable container laws.

Each law is a small function registered with :func:`law`; it receives one
sample value plus a fallback and returns True when the law holds.
:func:`check_laws` runs every registered law over every sample.

Example
-------
```python
from optionette.laws import check_laws

failures = [r for r in check_laws([1, "a"], fallback=0) if not r.passed]
```
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List

from optionette.core.combinators import and_then, contains, flatten, map_, xor
from optionette.core.errors import EmptyValueError
from optionette.core.option import Empty, Full
from optionette.utils.logging import log

__all__ = ["LawResult", "law", "registered_laws", "check_laws"]

_Check = Callable[[Any, Any], bool]
_REGISTRY: Dict[str, _Check] = {}


@dataclass(slots=True)
class LawResult:  # noqa: D101
    name: str
    sample: Any
    passed: bool
    detail: str = ""


def law(name: str):  # noqa: D401
    """Decorator: register *func* as the check for law *name*."""

    def _decorator(func: _Check) -> _Check:
        _REGISTRY[name] = func
        return func

    return _decorator


def registered_laws() -> List[str]:
    return list(_REGISTRY)


# --------------------------------------------------------------------------- #
# Laws
# --------------------------------------------------------------------------- #

@law("presence")
def _presence(x: Any, _: Any) -> bool:
    full, empty = Full(x), Empty()
    return (
        full.is_present() and not full.is_absent()
        and empty.is_absent() and not empty.is_present()
    )


@law("unwrap_or identity")
def _unwrap_or(x: Any, d: Any) -> bool:
    return Full(x).unwrap_or(d) == x and Empty().unwrap_or(d) == d


@law("unwrap")
def _unwrap(x: Any, _: Any) -> bool:
    if Full(x).unwrap() != x:
        return False
    try:
        Empty().unwrap()
    except EmptyValueError:
        return True
    return False


@law("functor")
def _functor(x: Any, _: Any) -> bool:
    return map_(Full(x), repr) == Full(repr(x)) and map_(Empty(), repr) == Empty()


@law("left identity")
def _left_identity(x: Any, _: Any) -> bool:
    def f(v: Any):
        return Full(repr(v))

    return and_then(Full(x), f) == f(x) and and_then(Empty(), f) == Empty()


@law("flatten")
def _flatten(x: Any, _: Any) -> bool:
    return (
        flatten(Full(Full(x))) == Full(x)
        and flatten(Full(Empty())) == Empty()
        and flatten(Empty()) == Empty()
    )


@law("xor")
def _xor(x: Any, d: Any) -> bool:
    return (
        xor(Full(x), Empty()) == Full(x)
        and xor(Empty(), Full(x)) == Full(x)
        and xor(Full(x), Full(d)) == Empty()
        and xor(Empty(), Empty()) == Empty()
    )


@law("take")
def _take(x: Any, _: Any) -> bool:
    opt = Full(x)
    taken = opt.take()
    return taken == Full(x) and opt == Empty()


@law("replace")
def _replace(x: Any, d: Any) -> bool:
    opt = Full(x)
    old = opt.replace(d)
    return old == Full(x) and opt == Full(d)


@law("insert alias")
def _insert_alias(x: Any, d: Any) -> bool:
    opt = Empty()
    ref = opt.insert(x)
    if opt != Full(x):
        return False
    ref.set(d)
    return opt == Full(d)


@law("get_or_insert keeps value")
def _get_or_insert(x: Any, d: Any) -> bool:
    opt = Full(x)
    ref = opt.get_or_insert(d)
    return opt == Full(x) and ref == x


@law("contains")
def _contains(x: Any, _: Any) -> bool:
    return contains(Full(x), x) and not contains(Empty(), x)


@law("copy")
def _copy(x: Any, _: Any) -> bool:
    original = Full(x)
    return original.copy() == original and original.copy() is not original


# --------------------------------------------------------------------------- #
# Runner
# --------------------------------------------------------------------------- #

def check_laws(values: Iterable[Any], fallback: Any = None) -> List[LawResult]:
    """Run every registered law over *values* and return one result per pair."""
    results: List[LawResult] = []
    for value in values:
        for name, check in _REGISTRY.items():
            try:
                passed = bool(check(value, fallback))
                detail = ""
            except Exception as exc:  # noqa: BLE001
                # A crashing law is reported as a violation, not propagated.
                passed = False
                detail = f"{type(exc).__name__}: {exc}"
            if not passed:
                log.debug("law %r violated for %r %s", name, value, detail)
            results.append(LawResult(name=name, sample=value, passed=passed, detail=detail))
    return results

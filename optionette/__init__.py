"""optionette: a typed Optional container with Maybe-monad combinators.

Main components:
* `Optional`: container that is either Full (one value) or Empty
* `Full` / `Empty` / `from_nullable`: constructors
* `Ref`: mutable alias returned by `insert` and `get_or_insert*`
* combinators: function forms of `map`, `and_then`, `xor`, `flatten`, ...
"""

# Version info
__version__ = "0.1.0"

# Core components
from optionette.core.option import Optional, Full, Empty, from_nullable
from optionette.core.ref import Ref
from optionette.core.result import Result
from optionette.core.errors import EmptyValueError
from optionette.core.combinators import (
    map_,
    map_or,
    map_or_else,
    and_,
    and_then,
    xor,
    flatten,
    contains,
)

# Zero-value registry
from optionette.utils.defaults import register_default, unregister_default, zero_value

# Export all important symbols
__all__ = [
    # Core classes
    "Optional",
    "Ref",
    "Result",
    "EmptyValueError",

    # Constructors
    "Full",
    "Empty",
    "from_nullable",

    # Combinators
    "map_",
    "map_or",
    "map_or_else",
    "and_",
    "and_then",
    "xor",
    "flatten",
    "contains",

    # Defaults
    "register_default",
    "unregister_default",
    "zero_value",
]

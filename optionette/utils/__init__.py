"""optionette utilities."""

from .defaults import register_default, unregister_default, zero_value, registered_defaults

__all__ = [
    "register_default",
    "unregister_default",
    "zero_value",
    "registered_defaults",
]

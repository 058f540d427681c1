# holdreg/errors.py
"""
Errors raised by holders and registries.

Precondition failures (a None key or value) raise the builtin ValueError.
"""

from typing import Any


class HolderError(Exception):
    """Base class for holder and registry errors."""


class NotBoundError(HolderError, LookupError):
    """A value was required from a holder that has none bound yet."""

    def __init__(self, key: Any, holder: Any = None):
        self.key = key
        super().__init__(f"A value has not been defined for {holder if holder is not None else key!r}")


class AlreadyBoundError(HolderError, RuntimeError):
    """
    A key already carries a value that is not the offered value.

    Attributes:
        key: The conflicting key
        old_value: The value already bound to the key
        new_value: The value that was rejected
    """

    def __init__(self, key: Any, old_value: Any, new_value: Any):
        self.key = key
        self.old_value = old_value
        self.new_value = new_value
        super().__init__(f"{key} is already bound to {old_value}, cannot bind to {new_value}")

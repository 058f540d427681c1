# holdreg/registry/__init__.py
"""
Key to holder registry.

The registry hands out one holder per key. A holder can be requested
before its value is registered, and is filled in place once it is.

Example:
    registry = Registry()
    logger_ref = registry.get_or_create_holder("logger")

    # Later, during wiring:
    registry.register("logger", make_logger())
    logger_ref.value_or_fail()
"""

from .registry import Registry, already_bound

__all__ = ["Registry", "already_bound"]

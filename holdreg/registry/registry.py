# holdreg/registry/registry.py
"""
Key to holder registry with forward references.

The registry maps each key to exactly one holder, enabling:
- Handing out a holder for a key before its value exists
- Binding the value into that same holder later
- Detecting a key registered twice with different values
- Finding forward references that were never satisfied
"""

import contextlib
import logging
import threading
from typing import Any, Dict, Generic, Iterator, KeysView, List, Optional, TypeVar

from ..errors import AlreadyBoundError
from ..holder import Holder, Immediate, Lazy

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def already_bound(key: Any, old_value: Any, new_value: Any) -> Optional[AlreadyBoundError]:
    """
    Decide whether offering new_value for key conflicts with old_value.

    Values are compared by identity, not equality: two equal but distinct
    objects conflict.

    Returns:
        The error to raise, or None if the values are the same object
    """
    if old_value is not new_value:
        return AlreadyBoundError(key, old_value, new_value)
    return None


class Registry(Generic[K, V]):
    """
    A key to holder registry.

    Holders are created on first access (Lazy, via get_or_create_holder) or
    on first registration (Immediate, via register) and are never removed
    or replaced.

    Example:
        registry = Registry()
        ref = registry.get_or_create_holder("db")   # forward reference
        registry.register("db", database)
        ref.value_or_fail() is database             # True
    """

    def __init__(self, name: Optional[str] = None, thread_safe: bool = True):
        """
        Initialize an empty registry.

        Args:
            name: Optional label used in repr and log messages
            thread_safe: If True, guard every operation with a lock
        """
        self.name = name
        self.thread_safe = thread_safe
        self._holders: Dict[K, Holder[K, V]] = {}
        self._lock = threading.RLock() if thread_safe else None

    @classmethod
    def create(cls, name: Optional[str] = None, thread_safe: bool = True) -> "Registry[K, V]":
        """Create a new, empty registry."""
        return cls(name=name, thread_safe=thread_safe)

    def _guard(self):
        return self._lock if self._lock is not None else contextlib.nullcontext()

    def _label(self) -> str:
        return self.name or "registry"

    def get_holder(self, key: K) -> Optional[Holder[K, V]]:
        """
        Get the holder for key without creating one.

        Returns None if the key was never registered or requested.
        """
        if key is None:
            raise ValueError("key must not be None")
        with self._guard():
            return self._holders.get(key)

    def get_holder_optionally(self, key: K) -> Optional[Holder[K, V]]:
        """Get the holder for key when absence is an expected outcome."""
        return self.get_holder(key)

    def get_or_create_holder(self, key: K) -> Holder[K, V]:
        """
        Get the holder for key, creating an unbound Lazy holder if none exists.

        The returned holder may already carry a value, or it may be empty
        pending a later register() of the same key.
        """
        if key is None:
            raise ValueError("key must not be None")
        with self._guard():
            holder = self._holders.get(key)
            if holder is None:
                holder = Lazy(key)
                self._holders[key] = holder
                logger.debug(f"{self._label()}: created forward reference for {key!r}")
            return holder

    def register(self, key: K, value: V) -> Holder[K, V]:
        """
        Register value for key.

        Args:
            key: Key to register under
            value: Value to bind; compared by identity with any existing value

        Returns:
            The key's holder. This is the holder handed out earlier by
            get_or_create_holder() if there was one.

        Raises:
            ValueError: If key or value is None
            AlreadyBoundError: If key already carries a different value
        """
        if key is None:
            raise ValueError("key must not be None")
        if value is None:
            raise ValueError("value must not be None")

        with self._guard():
            holder = self._holders.get(key)

            if holder is None:
                holder = Immediate(key, value)
                self._holders[key] = holder
                logger.debug(f"{self._label()}: registered {key!r}")
                return holder

            old_value = None
            if isinstance(holder, Immediate):
                old_value = holder.value
            elif isinstance(holder, Lazy):
                # The holder was requested before registration: fill it in place
                old_value = holder._bind(value)
                if old_value is None:
                    logger.debug(f"{self._label()}: bound forward reference {key!r}")

            if old_value is not None:
                error = already_bound(key, old_value, value)
                if error is not None:
                    raise error

            return holder

    def keys(self) -> KeysView[K]:
        """
        Get a live, read-only view of the keys.

        The view reflects later registrations and cannot be mutated.
        """
        return self._holders.keys()

    def holders(self) -> List[Holder[K, V]]:
        """List all holders."""
        with self._guard():
            return list(self._holders.values())

    def unbound_keys(self) -> List[K]:
        """Keys whose holders were requested but never registered."""
        with self._guard():
            return [key for key, holder in self._holders.items() if not holder.bound()]

    def validate(self) -> List[str]:
        """Check every forward reference was satisfied. Returns list of errors (empty if valid)."""
        return [f"Key {key!r} was referenced but never registered" for key in self.unbound_keys()]

    def __contains__(self, key: object) -> bool:
        return key in self._holders

    def __len__(self) -> int:
        return len(self._holders)

    def __iter__(self) -> Iterator[K]:
        with self._guard():
            return iter(list(self._holders))

    def __repr__(self) -> str:
        return f"Registry(name={self.name!r}, keys={len(self._holders)})"

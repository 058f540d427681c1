# holdreg/holder.py
"""
Holders: handles over a value that may not exist yet.

An Immediate holder is created with its value. A Lazy holder is created
with only a key and is bound at most once, later, by the registry that
owns it. Callers only ever read from holders.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, Optional, TypeVar

from .errors import NotBoundError

K = TypeVar("K")
V = TypeVar("V")


class HolderType(Enum):
    """How a holder came to exist."""
    IMMEDIATE = auto()   # Value known at creation
    LAZY = auto()        # Created as a forward reference, bound later


class Holder(ABC, Generic[K, V]):
    """
    Read-only view of a registry slot.

    Subclasses provide key, value and type; everything else is derived.
    """

    @property
    @abstractmethod
    def key(self) -> K:
        pass

    @property
    @abstractmethod
    def value(self) -> Optional[V]:
        """The bound value, or None if nothing is bound yet."""
        pass

    @property
    @abstractmethod
    def type(self) -> HolderType:
        pass

    def bound(self) -> bool:
        """Check if a value is associated with this holder."""
        return self.value is not None

    def value_optionally(self) -> Optional[V]:
        """Get the value when absence is an expected outcome."""
        return self.value

    def value_or_fail(self) -> V:
        """
        Get the value, or raise if none is bound.

        Raises:
            NotBoundError: If no value is bound
        """
        value = self.value
        if value is None:
            raise NotBoundError(self.key, self)
        return value


@dataclass(frozen=True, eq=False)
class Immediate(Holder[K, V]):
    """A holder whose value was known at creation. Always bound."""
    _key: K
    _value: V

    def __post_init__(self):
        if self._key is None:
            raise ValueError("key must not be None")
        if self._value is None:
            raise ValueError("value must not be None")

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    @property
    def type(self) -> HolderType:
        return HolderType.IMMEDIATE

    def bound(self) -> bool:
        return True

    def value_or_fail(self) -> V:
        return self._value

    def __repr__(self) -> str:
        return f"Immediate(key={self._key!r}, value={self._value!r})"


class Lazy(Holder[K, V]):
    """
    A forward reference: created before its value exists.

    The value is attached through _bind(), which only the owning registry
    calls. The type stays LAZY after binding.
    """

    def __init__(self, key: K):
        if key is None:
            raise ValueError("key must not be None")
        self._key = key
        self._value: Optional[V] = None

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> Optional[V]:
        return self._value

    @property
    def type(self) -> HolderType:
        return HolderType.LAZY

    def _bind(self, value: V) -> Optional[V]:
        """
        Attach value if nothing is bound yet.

        Returns:
            None if the value was stored, otherwise the value already bound
            (which is left in place)
        """
        if self._value is None:
            self._value = value
            return None
        return self._value

    def __repr__(self) -> str:
        return f"Lazy(key={self._key!r}, value={self._value!r})"

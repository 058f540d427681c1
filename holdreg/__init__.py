# holdreg - Key-indexed value registry with forward references
#
# A caller may ask for a handle to a key's value before the value exists,
# and the value is later bound into that same handle. Useful for plugin and
# object-graph wiring where components refer to each other before all of
# them are constructed.
#
# Core concepts:
# - Holder: A read-only handle for one key, bound or not yet bound
# - Immediate: A holder created together with its value
# - Lazy: A holder created as a forward reference, bound once later
# - Registry: Maps keys to holders and reconciles later registrations

from .errors import HolderError, NotBoundError, AlreadyBoundError
from .holder import Holder, HolderType, Immediate, Lazy
from .registry import Registry

__all__ = [
    # Holders
    "Holder",
    "HolderType",
    "Immediate",
    "Lazy",
    # Registry
    "Registry",
    # Errors
    "HolderError",
    "NotBoundError",
    "AlreadyBoundError",
]

__version__ = "0.1.0"

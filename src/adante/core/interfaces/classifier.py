from __future__ import annotations
from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar('T_co', covariant=True)


@runtime_checkable
class KeyClassifierProtocol(Protocol[T_co]):
    """Pure function mapping a key string to a caller-defined value.

    An unrecognized key is signaled by raising `LookupError` (e.g. `KeyError`)
    or `ValueError` (what `Enum(value)` raises). Any other exception is
    treated as a bug in the classifier and is not caught.
    """

    def __call__(self, key: str) -> T_co:
        ...


@runtime_checkable
class ArgumentTypeProtocol(Protocol):
    """A type that knows how to build itself from a key string."""

    @classmethod
    def from_str(cls, key: str):
        """Return the member for `key` or raise LookupError/ValueError."""
        ...

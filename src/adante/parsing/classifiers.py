from __future__ import annotations

"""Adapters that turn caller-defined key sets into key classifiers.

The argument classifier only needs a callable ``classify(key) -> value``
that raises LookupError/ValueError for unknown keys. Callers rarely write
one by hand, so `as_classifier` accepts the shapes they usually already
have:

    * an Enum subclass (member values are keys, or tuples of alias keys)
    * a type with a ``from_str(key)`` classmethod
    * a Mapping from key string to value
    * any other callable
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterable, List, Type, TypeVar

T = TypeVar('T')

# Exceptions a classifier may raise to mean "unrecognized key".
CLASSIFICATION_ERRORS = (LookupError, ValueError)


@dataclass(frozen=True)
class MappingClassifier(Generic[T]):
    """Classify keys by dictionary lookup."""

    table: Mapping[str, T]

    def __call__(self, key: str) -> T:
        return self.table[key]

    def keys(self) -> List[str]:
        return list(self.table.keys())


@dataclass(frozen=True)
class EnumClassifier(Generic[T]):
    """Classify keys into members of an Enum.

    A member value may be a single key string or a tuple/list/frozenset of
    alias strings::

        class Flags(enum.Enum):
            HELP = ("-h", "--help")
            VERBOSE = ("-v", "--verbose")

    Two members claiming the same key is a definition error.
    """

    enum_cls: Type[enum.Enum]
    _table: Dict[str, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        table: Dict[str, Any] = {}
        for member in self.enum_cls:
            for key in _member_keys(member.value):
                if key in table and table[key] is not member:
                    raise ValueError(
                        f'{self.enum_cls.__name__}: key {key!r} claimed by both '
                        f'{table[key].name} and {member.name}'
                    )
                table[key] = member
        object.__setattr__(self, '_table', table)

    def __call__(self, key: str) -> Any:
        return self._table[key]

    def keys(self) -> List[str]:
        return list(self._table.keys())


def _member_keys(value: Any) -> Iterable[str]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (tuple, list, frozenset, set)):
        return tuple(v for v in value if isinstance(v, str))
    return ()


def as_classifier(obj: Any) -> Callable[[str], Any]:
    """Return a key classifier for *obj*.

    Raises:
        TypeError: If *obj* has none of the supported shapes.
    """
    if isinstance(obj, (MappingClassifier, EnumClassifier)):
        return obj
    if isinstance(obj, type) and issubclass(obj, enum.Enum):
        from_str = getattr(obj, 'from_str', None)
        if callable(from_str):
            return from_str
        return EnumClassifier(obj)
    from_str = getattr(obj, 'from_str', None)
    if callable(from_str):
        return from_str
    if isinstance(obj, Mapping):
        return MappingClassifier(obj)
    if callable(obj):
        return obj
    raise TypeError(f'cannot build a key classifier from {type(obj).__name__!r}')


def known_keys(classifier: Any) -> List[str]:
    """Best-effort list of recognized keys, for diagnostics only."""
    keys = getattr(classifier, 'keys', None)
    if callable(keys):
        return [str(k) for k in keys()]
    return []


__all__ = [
    'CLASSIFICATION_ERRORS',
    'EnumClassifier',
    'MappingClassifier',
    'as_classifier',
    'known_keys',
]

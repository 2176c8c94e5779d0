from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Tuple, TypeVar

K = TypeVar('K')
A = TypeVar('A')


@dataclass(frozen=True)
class Flag(Generic[K]):
    """A classified flag token: `key` from the flag classifier, raw `value` after '='."""
    key: K
    value: Optional[str] = None


@dataclass(frozen=True)
class ParseResult(Generic[K, A]):
    """Successful outcome of a parse.

    `flags` and `actions` each keep the order in which their source tokens
    were seen. The interleaving between the two is not recorded.
    """
    flags: Tuple[Flag[K], ...] = field(default_factory=tuple)
    actions: Tuple[A, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> 'ParseResult[K, A]':
        return cls()

    def __len__(self) -> int:
        return len(self.flags) + len(self.actions)

    def has_flag(self, key: Any) -> bool:
        return any(f.key == key for f in self.flags)

    def flag_value(self, key: Any, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first flag with `key`, or `default`.

        A flag given without '=' has no value, so `default` is returned for it too.
        """
        for f in self.flags:
            if f.key == key:
                return default if f.value is None else f.value
        return default

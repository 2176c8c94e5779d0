"""Key types shared by the test-suite (mirrors a typical caller's definitions)."""
from __future__ import annotations

import enum


class ErrorType(enum.Enum):
    SYNTAX = "Improper syntax usage"
    FLAG_VAL = "No associated value for given flag"
    NO_FLAG_VAL = "Need associated value for given flag"
    NOT_RECOGNIZED = "Action or flag is not recognized"

    def handle(self) -> None:
        raise SystemExit(f"handled:{self.name}")

    def as_str(self) -> str:
        return self.value


class FlagType(enum.Enum):
    HELP = ("-h", "--help")
    VERBOSE = ("-v", "--verbose")
    PRINT = ("-p", "--print")


class ActionType(enum.Enum):
    ADD = ("add", "a")
    REMOVE = ("remove", "r")
    EDIT = ("edit", "e")


class Color:
    """A from_str-style key type that is not an Enum."""

    _NAMES = ("red", "green", "blue")

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Color) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def from_str(cls, key: str) -> "Color":
        if key not in cls._NAMES:
            raise ValueError(key)
        return cls(key)


def register_test_keys(registry) -> None:
    """Plugin registrar used through ADANTE_CLASSIFIER_PLUGINS."""
    registry.register_classifier("test-flags", lambda: FlagType)
    registry.register_classifier("test-actions", lambda: ActionType)


def broken_registrar(registry) -> None:
    raise RuntimeError("boom")


def reentrant_registrar(registry) -> None:
    """Registers, then queries the registry from inside the bootstrap."""
    registry.register_classifier("outer", lambda: FlagType)
    seen = registry.available_classifiers()
    registry.register_classifier("inner-saw-" + "+".join(seen), lambda: ActionType)


def slow_registrar(registry) -> None:
    import time

    registry.register_classifier("first", lambda: FlagType)
    time.sleep(0.05)
    registry.register_classifier("second", lambda: ActionType)

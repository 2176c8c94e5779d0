from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorProtocol(Protocol):
    """Optional surface for caller error values.

    The classifier never calls these; only the CLI helpers and exception
    messages do, after a parse has already failed.
    """

    def handle(self) -> None:
        """React to the error (print, exit, raise...). Caller-defined."""
        ...

    def as_str(self) -> str:
        """Return a human-readable message for the error."""
        ...

from __future__ import annotations

"""Exceptions raised by the argument classifier.

The classifier has a single failure mode: a token (or the key part of a
flag token) that the caller's classifier does not recognize. The caller's
own error value travels on the exception untouched, so callers can tell
failures apart only by the error value they supplied.
"""

from typing import Any, Optional

from adante.core.interfaces.error import ErrorProtocol


class AdanteError(Exception):
    """Base class for adante exceptions."""


class UnrecognizedKeyError(AdanteError, LookupError):
    """Raised when a token fails classification.

    Attributes:
        error: The caller-supplied error value, returned as-is (same object).
        token: The raw token being classified.
        key: The string passed to the classifier ('' for an empty token).
        kind: 'flag' or 'action'.
        index: Zero-based position of the token in the input sequence.
    """

    def __init__(self, error: Any, *, token: str, key: str, kind: str, index: Optional[int] = None) -> None:
        self.error = error
        self.token = token
        self.key = key
        self.kind = kind
        self.index = index
        super().__init__(self._describe())

    def _describe(self) -> str:
        if isinstance(self.error, ErrorProtocol):
            return str(self.error.as_str())
        if not self.token:
            return 'empty token is not a valid flag or action'
        return f"unrecognized {self.kind} {self.key!r}"

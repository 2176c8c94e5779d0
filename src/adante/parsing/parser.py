# adante/parsing/parser.py
from __future__ import annotations

"""Argument classifier: routes each token to the flag or the action classifier.

One linear pass, fail-fast. Either every token is classified and a
`ParseResult` comes back, or the first unrecognized token aborts the parse
and the caller's error value comes back alone.
"""

from typing import Any, Callable, Iterable, List, NoReturn, Optional, TypeVar, Union

from adante.core.errors import UnrecognizedKeyError
from adante.core.interfaces.logging import LoggerLikeProtocol
from adante.core.models import Flag, ParseResult
from adante.logging.helpers import get_logger, trace_parse
from adante.parsing.classifiers import CLASSIFICATION_ERRORS, as_classifier
from adante.parsing.tokenize import is_flag, split_flag

E = TypeVar('E')

FLAG = 'flag'
ACTION = 'action'


class ArgumentClassifier:
    """Classify command-line tokens into flags and actions.

    Parameters
    ----------
    flags:
        Anything `as_classifier` accepts; receives the key part of each
        '-'-prefixed token.
    actions:
        Anything `as_classifier` accepts; receives every other token whole.
    logger:
        Anything with debug/info/warning/error methods; defaults to
        the 'adante.parser' logger.

    Instances hold no per-parse state and can be shared between threads.
    """

    def __init__(self, flags: Any, actions: Any, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._flags: Callable[[str], Any] = as_classifier(flags)
        self._actions: Callable[[str], Any] = as_classifier(actions)
        self._log: LoggerLikeProtocol = logger or get_logger('parser')

    @property
    def flag_classifier(self) -> Callable[[str], Any]:
        return self._flags

    @property
    def action_classifier(self) -> Callable[[str], Any]:
        return self._actions

    def parse(self, tokens: Iterable[str], on_error: Any) -> ParseResult:
        """Classify *tokens* or raise `UnrecognizedKeyError` carrying *on_error*."""
        flags: List[Flag] = []
        actions: List[Any] = []

        for index, token in enumerate(tokens):
            if not token:
                self._reject(on_error, token=token, key='', kind=ACTION, index=index)

            if is_flag(token):
                key, value = split_flag(token)
                flags.append(Flag(self._classify(self._flags, key, on_error, token, FLAG, index), value))
            else:
                actions.append(self._classify(self._actions, token, on_error, token, ACTION, index))

        result = ParseResult(flags=tuple(flags), actions=tuple(actions))
        self._log.debug('parsed %d token(s): %d flag(s), %d action(s)',
                        len(result), len(result.flags), len(result.actions))
        return result

    def try_parse(self, tokens: Iterable[str], on_error: E) -> Union[ParseResult, E]:
        """Like `parse`, but return *on_error* itself instead of raising."""
        try:
            return self.parse(tokens, on_error)
        except UnrecognizedKeyError as exc:
            if exc.error is not on_error:
                raise
            return on_error

    def _classify(self, classifier: Callable[[str], Any], key: str, on_error: Any,
                  token: str, kind: str, index: int) -> Any:
        try:
            value = classifier(key)
        except CLASSIFICATION_ERRORS:
            self._reject(on_error, token=token, key=key, kind=kind, index=index)
        trace_parse(self._log, f'{kind} {key!r} -> {value!r}', index=index, token=token)
        return value

    def _reject(self, on_error: Any, *, token: str, key: str, kind: str, index: int) -> NoReturn:
        self._log.debug('rejected %s %r at position %d', kind, token, index)
        raise UnrecognizedKeyError(on_error, token=token, key=key, kind=kind, index=index) from None


def parse(tokens: Iterable[str], on_error: Any, *, flags: Any, actions: Any) -> ParseResult:
    """Classify *tokens* with a throwaway `ArgumentClassifier`.

    Raises:
        UnrecognizedKeyError: On the first token that fails classification;
            its `.error` is *on_error*.
    """
    return ArgumentClassifier(flags, actions).parse(tokens, on_error)


def try_parse(tokens: Iterable[str], on_error: E, *, flags: Any, actions: Any) -> Union[ParseResult, E]:
    """Classify *tokens*, returning *on_error* unchanged on the first failure."""
    return ArgumentClassifier(flags, actions).try_parse(tokens, on_error)


__all__ = ['ArgumentClassifier', 'parse', 'try_parse', 'FLAG', 'ACTION']

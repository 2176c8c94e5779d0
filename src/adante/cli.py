from __future__ import annotations

"""Command-line helpers for adante.

Two entry points live here:

* `parse_process_args` – what an application calls from its own `main()`:
  takes `sys.argv` minus the program name, classifies it, and hands any
  failure to the caller's error value (`handle()`), exiting otherwise.
* `main` – the `adante` console script, a small inspector that classifies
  tokens with classifiers referenced as 'module:Attr' or 'plugin:<name>'
  and prints the result as JSON.
"""

import argparse
import enum
import json
import sys
from typing import Any, Dict, List, NoReturn, Optional, Sequence, Tuple

from adante.core.errors import UnrecognizedKeyError
from adante.core.interfaces.error import ErrorProtocol
from adante.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from adante.core.models import ParseResult
from adante.logging.factory import DefaultLoggerFactory
from adante.logging.helpers import get_logger
from adante.parsing.classifiers import known_keys
from adante.parsing.parser import ArgumentClassifier
from adante.plugins.registry import resolve_classifier

logger = get_logger('cli')

EXIT_OK = 0
EXIT_UNRECOGNIZED = 1
EXIT_USAGE = 2

_CLI_ERROR = 'unrecognized'


def _configure_logging(factory: LoggerFactoryProtocol) -> LoggerLikeProtocol:
    """Route the module logger through *factory* and return it."""
    global logger
    logger = factory.get_logger('cli')
    return logger


def _fatal(msg: str, code: int = EXIT_UNRECOGNIZED) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def parse_process_args(
    flags: Any,
    actions: Any,
    on_error: Any,
    argv: Optional[Sequence[str]] = None,
) -> ParseResult:
    """Classify the process arguments, exiting on failure.

    Args:
        flags: Flag classifier (anything `as_classifier` accepts).
        actions: Action classifier (anything `as_classifier` accepts).
        on_error: Caller error value. If it implements `handle()`, that is
            called on failure; it is expected not to return.
        argv: Tokens to classify. Defaults to `sys.argv[1:]` (program name
            dropped); when given, it is used as-is.

    Returns:
        The ParseResult on success.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    try:
        return ArgumentClassifier(flags, actions).parse(tokens, on_error)
    except UnrecognizedKeyError as exc:
        if isinstance(exc.error, ErrorProtocol):
            exc.error.handle()
            sys.exit(EXIT_UNRECOGNIZED)
        _fatal(str(exc))


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='adante',
        usage='%(prog)s --flags REF --actions REF [OPTIONS] [--] TOKEN ...',
        description=(
            'Classify command-line tokens into flags and actions and print the result as JSON.\n'
            "Put TOKENs after '--' so that '-'-prefixed tokens are not read as options."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument(
        '--flags',
        metavar='REF',
        dest='flags_ref',
        required=True,
        help="Flag classifier: 'module.path:Attr' (Enum, mapping, callable, from_str type) or 'plugin:<name>'.",
    )
    p.add_argument(
        '--actions',
        metavar='REF',
        dest='actions_ref',
        required=True,
        help='Action classifier, same reference syntax as --flags.',
    )
    p.add_argument('--json-logs', action='store_true', help='Emit logs as JSON (also ADANTE_JSON_LOGS=1).')
    p.add_argument('--debug', action='store_true', help='Log at DEBUG level.')
    p.add_argument('--indent', type=int, default=None, metavar='N', help='Pretty-print the JSON output.')
    p.add_argument('tokens', nargs='*', metavar='TOKEN', help=argparse.SUPPRESS)
    return p


def _split_passthrough(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split *argv* at the first '--': (options, verbatim tokens)."""
    argv = list(argv)
    if '--' in argv:
        i = argv.index('--')
        return argv[:i], argv[i + 1:]
    return argv, []


def _render_key(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.name
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def result_to_payload(result: ParseResult) -> Dict[str, Any]:
    """JSON-friendly view of a ParseResult; Enum members render as their names."""
    return {
        'flags': [{'key': _render_key(f.key), 'value': f.value} for f in result.flags],
        'actions': [_render_key(a) for a in result.actions],
    }


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    logger_factory: Optional[LoggerFactoryProtocol] = None,
) -> int:
    """Run the `adante` inspector.

    Args:
        argv: Command line without the program name (defaults to sys.argv[1:]).
        logger_factory: Where CLI logs go. Defaults to a DefaultLoggerFactory
            built from --json-logs/--debug and ADANTE_JSON_LOGS.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    options, passthrough = _split_passthrough(argv)

    ns = _build_parser().parse_args(options)
    factory = logger_factory or DefaultLoggerFactory.from_env(json_logs=ns.json_logs, debug=ns.debug)
    _configure_logging(factory)

    try:
        flag_cls = resolve_classifier(ns.flags_ref)
        action_cls = resolve_classifier(ns.actions_ref)
    except (ImportError, KeyError, TypeError) as exc:
        _fatal(f'cannot load classifier: {exc}', EXIT_USAGE)

    tokens = [*ns.tokens, *passthrough]
    classifier = ArgumentClassifier(flag_cls, action_cls, logger=factory.get_logger('parser'))
    try:
        result = classifier.parse(tokens, _CLI_ERROR)
    except UnrecognizedKeyError as exc:
        expected = known_keys(flag_cls if exc.kind == 'flag' else action_cls)
        hint = f" (expected one of: {', '.join(expected)})" if expected else ''
        _fatal(f'token #{exc.index}: {exc}{hint}')

    # Undecodable argv bytes arrive as lone surrogates; ASCII output escapes them.
    sys.stdout.write(json.dumps(result_to_payload(result), indent=ns.indent) + '\n')
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())

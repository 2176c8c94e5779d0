from __future__ import annotations

"""Small logging helpers to standardize adante logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'adante' logger.
    - get_logger: Namespaced logger factory ('adante.*').
    - trace_parse utilities gated by ADANTE_TRACE_PARSE.

The library itself never configures logging; only the `adante` console
script calls `setup_base_logger`. Embedding applications keep full control.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional, TextIO

from adante.constants import LOGGER_ROOT

if TYPE_CHECKING:
    from adante.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'adante.parser').
        - msg: Formatted message string.
        - version: adante.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        """Resolve the adante version lazily to avoid import cycles."""
        try:
            from adante import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv('ADANTE_VERSION', 'unknown')

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'adante' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(LOGGER_ROOT)
    if base.handlers:
        base.setLevel(level)
        return base

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def reset_base_logger() -> None:
    """Drop handlers installed by `setup_base_logger` (tests, re-configuration)."""
    base = logging.getLogger(LOGGER_ROOT)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.propagate = True
    base.setLevel(logging.NOTSET)


def is_base_configured() -> bool:
    """True once `setup_base_logger` installed a handler that is still attached."""
    return bool(logging.getLogger(LOGGER_ROOT).handlers)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'adante'."""
    if not name or name == LOGGER_ROOT:
        return logging.getLogger(LOGGER_ROOT)
    if name.startswith(LOGGER_ROOT + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{LOGGER_ROOT}.{name}')


def is_trace_parse_enabled() -> bool:
    """Check if per-token tracing is enabled via env flag."""
    return os.getenv('ADANTE_TRACE_PARSE') == '1'


def trace_parse(logger: 'LoggerLikeProtocol', message: str, **ctx) -> None:
    """Emit debug-verbosity per-token trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached as `record.context`.
    """
    if not is_trace_parse_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)

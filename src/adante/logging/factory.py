from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

from adante.logging.helpers import get_logger, is_base_configured, setup_base_logger


class DefaultLoggerFactory:
    """Hands out 'adante.*' loggers, installing the base handler on demand.

    The base handler is (re)installed whenever the 'adante' logger has none,
    so a factory keeps working after `reset_base_logger()` was called.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream

    @classmethod
    def from_env(cls, *, json_logs: bool = False, debug: bool = False,
                 stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory from CLI switches, honoring ADANTE_JSON_LOGS=1."""
        return cls(
            json_logs=json_logs or os.getenv('ADANTE_JSON_LOGS') == '1',
            level=logging.DEBUG if debug else logging.INFO,
            stream=stream,
        )

    @property
    def json_logs(self) -> bool:
        return self._json

    @property
    def level(self) -> int:
        return self._level

    def get_logger(self, name: str) -> logging.Logger:
        if not is_base_configured():
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        else:
            get_logger().setLevel(self._level)
        return get_logger(name)

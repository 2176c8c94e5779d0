from .factory import DefaultLoggerFactory
from .helpers import JsonLogFormatter, get_logger, reset_base_logger, setup_base_logger, trace_parse

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'reset_base_logger',
    'setup_base_logger',
    'trace_parse',
]

from __future__ import annotations

from adante.constants import FLAG_PREFIX, KEY_VALUE_SEP
from adante.core.errors import AdanteError, UnrecognizedKeyError
from adante.core.interfaces import ArgumentTypeProtocol, ErrorProtocol, KeyClassifierProtocol
from adante.core.models import Flag, ParseResult
from adante.parsing.classifiers import EnumClassifier, MappingClassifier, as_classifier
from adante.parsing.parser import ArgumentClassifier, parse, try_parse
from adante.parsing.tokenize import is_flag, split_flag
from adante.cli import parse_process_args

__version__ = '0.2.0'

__all__ = [
    'AdanteError',
    'ArgumentClassifier',
    'ArgumentTypeProtocol',
    'EnumClassifier',
    'ErrorProtocol',
    'FLAG_PREFIX',
    'Flag',
    'KEY_VALUE_SEP',
    'KeyClassifierProtocol',
    'MappingClassifier',
    'ParseResult',
    'UnrecognizedKeyError',
    'as_classifier',
    'is_flag',
    'parse',
    'parse_process_args',
    'split_flag',
    'try_parse',
]

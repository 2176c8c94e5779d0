from .classifiers import EnumClassifier, MappingClassifier, as_classifier
from .parser import ArgumentClassifier, parse, try_parse
from .tokenize import is_flag, split_flag

__all__ = [
    'ArgumentClassifier',
    'EnumClassifier',
    'MappingClassifier',
    'as_classifier',
    'is_flag',
    'parse',
    'split_flag',
    'try_parse',
]

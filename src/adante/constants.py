from __future__ import annotations

"""Syntactic constants shared by the tokenizer and the classifier.

This module isolates public constants to reduce cross-module coupling.
"""

# A token whose first character is FLAG_PREFIX is routed to the flag classifier.
FLAG_PREFIX: str = '-'

# Only the first occurrence separates a flag key from its value.
KEY_VALUE_SEP: str = '='

# Logger namespace root.
LOGGER_ROOT: str = 'adante'

"""
tokenize – Syntactic helpers for adante argument tokens.

Only two decisions are made here, both purely syntactic:

1) Flag or action:
   A token is a flag when its first character is '-'. No check is made
   against any known flag name; that is the flag classifier's job.

2) Key / value split of a flag token:
   The whole token, leading '-' included, is scanned for the FIRST '='.
     • No '='       → key is the whole token, value is None.
     • '=' at pos p → key is token[:p], value is token[p+1:].
   The value may be an empty string ("-o=") and keeps any later '='
   verbatim ("-e=A=B" → key "-e", value "A=B").

Both helpers are free of side effects.
"""
from typing import Optional, Tuple

from adante.constants import FLAG_PREFIX, KEY_VALUE_SEP


def is_flag(token: str) -> bool:
    """Return True if *token* starts with the flag prefix.

    An empty token is neither a flag nor a valid action; callers must
    reject it before routing.
    """
    return token[:1] == FLAG_PREFIX


def split_flag(token: str) -> Tuple[str, Optional[str]]:
    """Split a flag *token* into ``(key, value)`` at the first separator.

    Examples
    --------
    >>> split_flag("-v")
    ('-v', None)
    >>> split_flag("-h=test")
    ('-h', 'test')
    >>> split_flag("--out=")
    ('--out', '')
    >>> split_flag("-e=A=B")
    ('-e', 'A=B')
    """
    key, sep, value = token.partition(KEY_VALUE_SEP)
    if not sep:
        return token, None
    return key, value

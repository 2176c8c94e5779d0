from .errors import AdanteError, UnrecognizedKeyError
from .models import Flag, ParseResult

__all__ = ['AdanteError', 'UnrecognizedKeyError', 'Flag', 'ParseResult']

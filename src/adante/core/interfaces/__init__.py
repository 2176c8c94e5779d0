from .classifier import ArgumentTypeProtocol, KeyClassifierProtocol
from .error import ErrorProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'ArgumentTypeProtocol',
    'KeyClassifierProtocol',
    'ErrorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]

from .fs import IncludeResolverProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .readers import LineSourceProtocol, SourceReaderProtocol

__all__ = [
    'IncludeResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'LineSourceProtocol',
    'SourceReaderProtocol',
]

"""Services package initialization."""

from services.cache_service import dataset_cache, cache_decorator
from services.errors import DataError, DataLoadError, MissingValueError, ZeroTotalError

__all__ = [
    'dataset_cache',
    'cache_decorator',
    'DataError',
    'DataLoadError',
    'MissingValueError',
    'ZeroTotalError',
]

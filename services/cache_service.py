"""Cache service for loaded datasets."""

import os
import tempfile
import time
import logging
import hashlib
import functools
from diskcache import Cache
from config.settings import APP_CONFIG

# Configure logging
logger = logging.getLogger(__name__)


class DatasetCache:
    """Memory cache in front of a disk cache, so restarts skip re-parsing."""

    def __init__(self, directory=None, size_limit=None, ttl=None, max_memory_items=100):
        """
        Initialize the cache.

        Args:
            directory (str): Disk cache location, defaults to the configured
                             directory under the system temp dir.
            size_limit (float): Disk cache size in bytes.
            ttl (int): Default time-to-live in seconds.
            max_memory_items (int): Entries kept in memory before pruning.
        """
        self._CACHE_DIR = directory or os.path.join(tempfile.gettempdir(), APP_CONFIG["cache_dir"])
        self._SIZE = size_limit or APP_CONFIG["cache_size"]
        self._TTL = ttl or APP_CONFIG["cache_ttl"]
        self._MAX_MEMORY_ITEMS = max_memory_items
        self._cache = None
        self._memory_cache = {}
        self._last_access = {}
        self._expires = {}
        self.initialize_cache()

    @property
    def directory(self):
        return self._CACHE_DIR

    @property
    def has_disk(self):
        return self._cache is not None

    def _prune_memory_cache(self):
        """Remove least recently used items once the memory cache is full."""
        if len(self._memory_cache) > self._MAX_MEMORY_ITEMS:
            sorted_items = sorted(self._last_access.items(), key=lambda x: x[1])
            to_remove = len(self._memory_cache) - self._MAX_MEMORY_ITEMS
            for key, _ in sorted_items[:to_remove]:
                self._memory_cache.pop(key, None)
                self._last_access.pop(key, None)
                self._expires.pop(key, None)

    def get(self, key):
        """
        Retrieve a value, trying memory before disk.

        Args:
            key: The cache key to retrieve

        Returns:
            The cached value or None if absent or expired
        """
        current_time = time.time()

        if key in self._memory_cache:
            if self._expires.get(key, current_time + 1) > current_time:
                self._last_access[key] = current_time
                return self._memory_cache[key]
            self._memory_cache.pop(key, None)
            self._last_access.pop(key, None)
            self._expires.pop(key, None)

        if self._cache is not None:
            try:
                value, expire_time = self._cache.get(key, expire_time=True)
            except Exception as e:
                logger.warning(f"Disk cache retrieval failed: {e}")
                return None
            if value is not None:
                self._memory_cache[key] = value
                self._last_access[key] = current_time
                if expire_time:
                    self._expires[key] = expire_time
                self._prune_memory_cache()
            return value
        return None

    def set(self, key, value, ttl=None):
        """
        Store a value in both memory and disk cache.

        Args:
            key: The cache key
            value: The value to cache
            ttl: Time-to-live in seconds, uses the default if None
        """
        ttl = ttl or self._TTL
        current_time = time.time()

        self._memory_cache[key] = value
        self._last_access[key] = current_time
        self._expires[key] = current_time + ttl
        self._prune_memory_cache()

        if self._cache is not None:
            try:
                self._cache.set(key, value, expire=ttl)
            except Exception as e:
                logger.warning(f"Disk cache set failed: {e}")

    def initialize_cache(self):
        """Set up the disk cache; fall back to memory only if that fails."""
        try:
            os.makedirs(self._CACHE_DIR, exist_ok=True)
            self._cache = Cache(
                directory=self._CACHE_DIR,
                size_limit=int(self._SIZE),
                eviction_policy='least-recently-used',
            )
            logger.info(f"Cache initialized at {self._CACHE_DIR} with size {self._SIZE/1e6:.0f}MB")
        except Exception as e:
            logger.warning(f"Disk cache initialization failed, using memory only: {e}")
            self._cache = None

    def clear(self):
        """Clear both memory and disk cache."""
        self._memory_cache.clear()
        self._last_access.clear()
        self._expires.clear()
        if self._cache is not None:
            try:
                self._cache.clear()
                logger.info("Cache cleared")
            except Exception as e:
                logger.error(f"Error clearing cache: {e}")

    def close(self):
        if self._cache is not None:
            self._cache.close()


def make_cache_key(func, args, kwargs):
    """Build a stable key from the function name and its arguments."""
    key_str = f"{func.__module__}.{func.__name__}:{args!r}:{sorted(kwargs.items())!r}"
    return hashlib.md5(key_str.encode()).hexdigest()


def create_cache_decorator(dataset_cache, ttl=None):
    """
    Create a decorator caching function results with a configurable TTL.

    Exceptions raised by the wrapped function propagate and are never cached.

    Args:
        dataset_cache: DatasetCache instance to use for caching
        ttl: Time-to-live in seconds (uses the cache default if None)

    Returns:
        decorator: Function decorator for caching results
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            key = make_cache_key(func, args, kwargs)

            result = dataset_cache.get(key)
            if result is not None:
                logger.debug(f"Cache hit for {func.__name__}")
                return result

            result = func(*args, **kwargs)
            dataset_cache.set(key, result, ttl=ttl)
            logger.debug(f"Cache miss for {func.__name__}, stored new result")
            return result
        return wrapper
    return decorator


# Initialize global cache instance
dataset_cache = DatasetCache()

# Create decorator with default app config TTL
cache_decorator = functools.partial(create_cache_decorator, dataset_cache)

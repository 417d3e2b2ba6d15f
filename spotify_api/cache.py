# spotify_api/cache.py
'''
Cache backends used by ApiClient to memoize tokens and responses.
 - A backend is anything with fetch(key) -> value | None and store(key, value) -> value.
 - NullCache is the process-wide default: every fetch misses, store hands the value back.
 - The default can be changed with default_cache_class(); clients capture it when they are built.
'''

from __future__ import annotations

import hashlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from django.core.cache.backends.base import DEFAULT_TIMEOUT
from django.utils.module_loading import import_string

from .exceptions import ConfigurationError
from .utils import InvalidToken, decrypt_value, encrypt_value, get_fernet

logger = logging.getLogger(__name__)


class CacheBackend(ABC):
    """
    Interface for cache backends. Absence is reported as None, never raised.
    resolve_cache() also accepts objects that only duck-type fetch and store.
    """

    @abstractmethod
    def fetch(self, key: str) -> Optional[Any]:
        """Value stored under key, or None."""
        ...

    @abstractmethod
    def store(self, key: str, value: Any) -> Any:
        """Store value under key and return it."""
        ...


class NullCache(CacheBackend):
    def fetch(self, key: str) -> Optional[Any]:
        return None

    def store(self, key: str, value: Any) -> Any:
        return value


class MemoryCache(CacheBackend):
    """
    Dict-backed cache living as long as the instance. Counts hits and misses.
    """

    def __init__(self):
        self._data: Dict[str, Any] = {}
        self.hits = 0
        self.misses = 0

    def fetch(self, key: str) -> Optional[Any]:
        value = self._data.get(key)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def store(self, key: str, value: Any) -> Any:
        self._data[key] = value
        return value

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class DjangoCache(CacheBackend):
    """
    Adapter over Django's cache framework (settings.CACHES[alias]).
    Keys are hashed because urls and authorization values are not valid memcached keys.
    The default timeout is the alias TIMEOUT setting; pass timeout=None to keep entries forever.
    """

    KEY_PREFIX = "spotify_api:"

    def __init__(self, alias: str = "default", timeout: Any = DEFAULT_TIMEOUT):
        self.alias = alias
        self.timeout = timeout

    @property
    def backend(self):
        from django.core.cache import caches

        return caches[self.alias]

    def make_key(self, key: str) -> str:
        return self.KEY_PREFIX + hashlib.sha256(key.encode()).hexdigest()

    def fetch(self, key: str) -> Optional[Any]:
        return self.backend.get(self.make_key(key))

    def store(self, key: str, value: Any) -> Any:
        self.backend.set(self.make_key(key), value, timeout=self.timeout)
        return value


class EncryptedCache(CacheBackend):
    """
    Stores Fernet-encrypted JSON in another backend so tokens are not kept in plaintext.
    Entries that cannot be decrypted with the current key are treated as misses.
    """

    def __init__(self, inner=None, key=None):
        self.inner = resolve_cache(inner) if inner is not None else MemoryCache()
        self.fernet = get_fernet(key)

    def fetch(self, key: str) -> Optional[Any]:
        token = self.inner.fetch(key)
        if token is None:
            return None
        try:
            return decrypt_value(self.fernet, token)
        except (InvalidToken, AttributeError, ValueError):
            logger.warning("Spotify API: discarding undecryptable cache entry")
            return None

    def store(self, key: str, value: Any) -> Any:
        self.inner.store(key, encrypt_value(self.fernet, value))
        return value


_default_cache_class = "spotify_api.cache.NullCache"


def default_cache_class(name=None):
    """
    Get, or set then get, the cache used by clients built from now on.
    `name` may be a dotted path, a backend class or a backend instance. Existing clients keep theirs.
    """
    global _default_cache_class
    if name is not None:
        _default_cache_class = name
    return _default_cache_class


def resolve_cache(identifier=None) -> CacheBackend:
    if identifier is None:
        identifier = default_cache_class()
    if isinstance(identifier, str):
        try:
            identifier = import_string(identifier)
        except ImportError as e:
            raise ConfigurationError(f"Unknown cache class {identifier!r}") from e
    if isinstance(identifier, type):
        identifier = identifier()
    if not (callable(getattr(identifier, "fetch", None)) and callable(getattr(identifier, "store", None))):
        raise ConfigurationError(f"{identifier!r} is not a cache backend (needs fetch and store)")
    return identifier

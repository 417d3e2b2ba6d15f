# spotify_api/api.py
'''
Client for raw Spotify Web API requests.
 - get_app_token: client-credentials token, looked up in the cache before hitting the accounts endpoint.
 - query: authenticated GET against an api path or a full url, memoized per (url, token).
 - use_cache / default_cache_class: swap the cache backend of one client or of every future client.
Failures are returned as Result values; nothing here raises on a missing token or a failed request.
'''

from __future__ import annotations

import logging
from typing import Any, Optional

from . import cache as cache_backends
from .clients.spotify import DEFAULT_VERSION, TOKEN_URL, RequestsTransport, to_url
from .config import ApiSettings
from .models import FailureKind, Result, Token
from .services.auth import request_app_token

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "|"


class ApiClient:
    """
    Holds either application credentials or an access token, a cache backend and the last raw result.
    One instance per logical session; token and last_result are not guarded against concurrent callers.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        token: Any = None,
        *,
        version: str = DEFAULT_VERSION,
        cache=None,
        transport=None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.token: Optional[Token] = Token.coerce(token)
        self.version = version
        self.cache = cache_backends.resolve_cache(cache)
        self.transport = transport if transport is not None else RequestsTransport()
        self.last_result: Any = None

    @classmethod
    def with_client(cls, client_id: str, client_secret: str, **kwargs) -> "ApiClient":
        return cls(client_id=client_id, client_secret=client_secret, **kwargs)

    @classmethod
    def with_token(cls, token, **kwargs) -> "ApiClient":
        return cls(token=token, **kwargs)

    @classmethod
    def from_env(cls, settings: Optional[ApiSettings] = None, **kwargs) -> "ApiClient":
        """
        Build a client from SPOTIFY_* environment variables. An access token wins over credentials.
        """
        settings = settings or ApiSettings.from_env()
        kwargs.setdefault("version", settings.version)
        kwargs.setdefault("cache", settings.cache_class)
        if "transport" not in kwargs:
            kwargs["transport"] = RequestsTransport(timeout=settings.timeout)
        if settings.access_token:
            return cls.with_token(settings.access_token, **kwargs)
        return cls.with_client(settings.client_id, settings.client_secret, **kwargs)

    @staticmethod
    def default_cache_class(name=None):
        return cache_backends.default_cache_class(name)

    def use_cache(self, cache) -> None:
        self.cache = cache_backends.resolve_cache(cache)

    @property
    def authorization(self) -> str:
        return self.token.authorization if self.token is not None else ""

    def get_app_token(self) -> Result[Token]:
        """
        Returns the cached application token if any, otherwise requests a new one.
        Cached tokens are reused as they are; expiry is not checked.
        """
        record = self.cache.fetch(TOKEN_URL)
        if record is not None:
            token = Token.from_body(record)
            if token is not None:
                logger.debug("Spotify API: application token served from cache")
                self.token = token
                return Result.success(self.token)
            logger.warning("Spotify API: ignoring cached application token without an access token")

        r = request_app_token(self.transport, self.client_id, self.client_secret)
        if not r.success():
            logger.warning("Spotify API: application token request failed (HTTP %s)", r.status_code)
            return Result.fail(
                FailureKind.TRANSPORT_FAILURE,
                r.error or f"token request returned HTTP {r.status_code}",
                status_code=r.status_code,
            )

        token = Token.from_body(r.content())
        if token is None:
            logger.warning("Spotify API: token response has no access token (HTTP %s)", r.status_code)
            return Result.fail(
                FailureKind.TRANSPORT_FAILURE,
                "token response has no access token",
                status_code=r.status_code,
            )

        self.cache.store(TOKEN_URL, token.as_dict())
        self.token = token
        return Result.success(self.token)

    def resolve_url(self, query: str) -> str:
        return to_url(query, self.version)

    def cache_key(self, url: str) -> str:
        return f"{url}{KEY_SEPARATOR}{self.authorization}"

    def query(self, query: str) -> Result:
        """
        GET an api path ("tracks/123") or a full url. Does not fetch a token when none is set.
        """
        authorization = self.authorization
        if not authorization:
            logger.error("Spotify API: no access token specified!")
            return Result.fail(FailureKind.MISSING_TOKEN, "no access token specified")

        url = self.resolve_url(query)
        key = self.cache_key(url)

        record = self.cache.fetch(key)
        if record is not None:
            logger.debug("Spotify API: cache hit for %s", url)
            return Result.success(record)

        r = self.transport.get(url, {"Authorization": authorization})
        if r.success():
            self.last_result = r.content()
            return Result.success(self.cache.store(key, self.last_result))

        result = Result.fail(
            FailureKind.TRANSPORT_FAILURE,
            r.error or f"GET {url} returned HTTP {r.status_code}",
            status_code=r.status_code,
        )
        self.last_result = result.failure
        return result

# spotify_api/config.py
'''
Settings read from the environment.
 - SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET: application credentials.
 - SPOTIFY_ACCESS_TOKEN: pre-supplied access token, used instead of the credentials when set.
 - SPOTIFY_API_VERSION: api version segment (default v1).
 - SPOTIFY_CACHE_CLASS: dotted path of the cache backend (default: the process-wide default).
 - SPOTIFY_TIMEOUT: request timeout in seconds (default 10).
'''

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .clients.spotify import DEFAULT_VERSION, TIMEOUT
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ApiSettings:
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    access_token: Optional[str] = None
    version: str = DEFAULT_VERSION
    cache_class: Optional[str] = None
    timeout: float = TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiSettings":
        env = os.environ if environ is None else environ
        timeout = env.get("SPOTIFY_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"SPOTIFY_TIMEOUT must be a number, got {timeout!r}") from e
        return cls(
            client_id=env.get("SPOTIFY_CLIENT_ID") or None,
            client_secret=env.get("SPOTIFY_CLIENT_SECRET") or None,
            access_token=env.get("SPOTIFY_ACCESS_TOKEN") or None,
            version=env.get("SPOTIFY_API_VERSION") or DEFAULT_VERSION,
            cache_class=env.get("SPOTIFY_CACHE_CLASS") or None,
            timeout=timeout,
        )

"""
Pytest fixtures for spotify_api tests.

Django is configured once with a local-memory cache so DjangoCache can be exercised without a server.
"""

from unittest.mock import MagicMock

import django
import pytest
from cryptography.fernet import Fernet
from django.conf import settings

from spotify_api import cache as cache_module
from spotify_api.clients.spotify import TransportResponse

if not settings.configured:
    settings.configure(
        INSTALLED_APPS=[],
        CACHES={
            "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache", "LOCATION": "spotify-api-tests"},
            "other": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache", "LOCATION": "spotify-api-other"},
            "short": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache", "LOCATION": "spotify-api-short", "TIMEOUT": 0},
        },
    )
    django.setup()


TOKEN_RESPONSE = {
    "access_token": "BQD-app-token",
    "token_type": "Bearer",
    "expires_in": 3600,
}

TRACK_RESPONSE = {
    "id": "123",
    "name": "Windowlicker",
    "artists": [{"id": "6kBDZFXuLrZgHnvmPu9NsG", "name": "Aphex Twin"}],
    "duration_ms": 367000,
}


def ok(body, status_code=200):
    return TransportResponse(status_code=status_code, body=body)


def failed(status_code=401, error=None):
    return TransportResponse(status_code=status_code, body={"error": "invalid_client"}, error=error)


@pytest.fixture(autouse=True)
def reset_default_cache():
    """Every test starts and ends with the pass-through default."""
    original = cache_module._default_cache_class
    yield
    cache_module._default_cache_class = original


@pytest.fixture
def token_response():
    return dict(TOKEN_RESPONSE)


@pytest.fixture
def track_response():
    return dict(TRACK_RESPONSE)


@pytest.fixture
def transport(track_response, token_response):
    """Transport double answering every GET with a track and every POST with a token."""
    mock = MagicMock()
    mock.get.return_value = ok(track_response)
    mock.post.return_value = ok(token_response)
    return mock


@pytest.fixture
def failing_transport():
    mock = MagicMock()
    mock.get.return_value = failed(500)
    mock.post.return_value = failed(400)
    return mock


@pytest.fixture
def fernet_key():
    return Fernet.generate_key().decode()

"""
Tests for the auth and catalog service helpers.
"""

import base64
from unittest.mock import MagicMock

from conftest import ok
from spotify_api.api import ApiClient
from spotify_api.cache import MemoryCache
from spotify_api.clients.spotify import TOKEN_URL
from spotify_api.services import catalog
from spotify_api.services.auth import app_auth_header, request_app_token


class TestAuth:
    def test_app_auth_header(self):
        assert app_auth_header("id", "secret") == base64.b64encode(b"id:secret").decode()

    def test_app_auth_header_without_credentials(self):
        assert base64.b64decode(app_auth_header(None, None)) == b":"

    def test_request_app_token(self, token_response):
        transport = MagicMock()
        transport.post.return_value = ok(token_response)

        r = request_app_token(transport, "id", "secret")

        assert r.content() == token_response
        url, data, headers = transport.post.call_args[0]
        assert url == TOKEN_URL
        assert data == {"grant_type": "client_credentials"}
        assert headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert headers["Authorization"].startswith("Basic ")


class TestCatalog:
    def test_track(self, transport, track_response):
        api = ApiClient.with_token("abc", transport=transport)

        result = catalog.track(api, "123")

        assert result.value == track_response
        assert transport.get.call_args[0][0] == "https://api.spotify.com/v1/tracks/123"

    def test_album_with_market(self, transport):
        api = ApiClient.with_token("abc", transport=transport)

        catalog.album(api, "4m2880jivSbbyEGAKfITCa", market="FR")

        assert transport.get.call_args[0][0] == "https://api.spotify.com/v1/albums/4m2880jivSbbyEGAKfITCa?market=FR"

    def test_artist_and_playlist(self, transport):
        api = ApiClient.with_token("abc", transport=transport)

        catalog.artist(api, "a1")
        catalog.playlist(api, "p1")

        urls = [c[0][0] for c in transport.get.call_args_list]
        assert urls == ["https://api.spotify.com/v1/artists/a1", "https://api.spotify.com/v1/playlists/p1"]

    def test_id_is_quoted(self, transport):
        api = ApiClient.with_token("abc", transport=transport)

        catalog.track(api, "../me")

        assert transport.get.call_args[0][0] == "https://api.spotify.com/v1/tracks/..%2Fme"

    def test_search(self, transport):
        api = ApiClient.with_token("abc", transport=transport)

        catalog.search(api, "aphex twin", ["artist", "album"], limit=5)

        assert transport.get.call_args[0][0] == (
            "https://api.spotify.com/v1/search?q=aphex+twin&type=artist%2Calbum&limit=5"
        )

    def test_search_is_cached_like_any_query(self, transport):
        api = ApiClient.with_token("abc", transport=transport, cache=MemoryCache())

        catalog.search(api, "windowlicker")
        catalog.search(api, "windowlicker")

        assert transport.get.call_count == 1

    def test_without_token(self, transport):
        result = catalog.track(ApiClient(transport=transport), "123")

        assert not result
        transport.get.assert_not_called()

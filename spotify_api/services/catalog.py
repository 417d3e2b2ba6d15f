# spotify_api/services/catalog.py
'''
Shortcuts for common catalog lookups. Each one is a single ApiClient.query call and returns its Result.
 - track / album / artist / playlist: fetch one object by Spotify id.
 - search: one page of search results; following `next` links is left to the caller.
'''

from __future__ import annotations

from typing import Iterable, Optional, Union
from urllib.parse import quote, urlencode


def _by_id(api, kind: str, spotify_id: str, market: Optional[str] = None):
    path = f"{kind}/{quote(spotify_id, safe='')}"
    if market:
        path += f"?{urlencode({'market': market})}"
    return api.query(path)


def track(api, track_id: str, *, market: Optional[str] = None):
    return _by_id(api, "tracks", track_id, market)


def album(api, album_id: str, *, market: Optional[str] = None):
    return _by_id(api, "albums", album_id, market)


def artist(api, artist_id: str):
    return _by_id(api, "artists", artist_id)


def playlist(api, playlist_id: str, *, market: Optional[str] = None):
    return _by_id(api, "playlists", playlist_id, market)


def search(
    api,
    q: str,
    types: Union[str, Iterable[str]] = "track",
    *,
    limit: Optional[int] = None,
    market: Optional[str] = None,
):
    """
    /search?q=...&type=track,album. `types` may be a comma separated string or an iterable.
    """
    if not isinstance(types, str):
        types = ",".join(types)
    params = {"q": q, "type": types}
    if limit is not None:
        params["limit"] = limit
    if market:
        params["market"] = market
    return api.query(f"search?{urlencode(params)}")

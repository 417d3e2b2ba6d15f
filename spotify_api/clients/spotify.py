# spotify_api/clients/spotify.py
'''
Transport layer for Spotify API interactions.
 - Resolves relative API paths against the versioned api endpoint.
 - Performs GET and form-encoded POST requests with the given headers.
 - Wraps every outcome in a TransportResponse so callers check success() instead of catching.
'''

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

ENDPOINT = "https://api.spotify.com"
ENDPOINT_ACCOUNT = "https://accounts.spotify.com"
TOKEN_URL = f"{ENDPOINT_ACCOUNT}/api/token"
DEFAULT_VERSION = "v1"
TIMEOUT = 10

_ABSOLUTE_URL = re.compile(r"^https?://")


def to_url(path_or_url: str, version: str = DEFAULT_VERSION) -> str:
    return path_or_url if _ABSOLUTE_URL.match(path_or_url) else f"{ENDPOINT}/{version}/{path_or_url}"


def sp_get(url: str, *, headers: dict, timeout=TIMEOUT, session=None):
    return (session or requests).get(url, headers=headers, timeout=timeout)


def sp_post_form(url: str, *, data: dict, headers: dict, timeout=TIMEOUT, session=None):
    return (session or requests).post(url, data=data, headers=headers, timeout=timeout)


@dataclass(frozen=True)
class TransportResponse:
    """
    Outcome of one HTTP call. status_code is 0 when the request never got a response.
    """
    status_code: int
    body: Any = None
    error: Optional[str] = None

    def success(self) -> bool:
        return self.error is None and 200 <= self.status_code < 300

    def content(self) -> Any:
        return self.body

    @classmethod
    def from_requests(cls, r: requests.Response) -> "TransportResponse":
        content_type = r.headers.get("Content-Type", "")
        if "json" in content_type and r.content:
            try:
                body = r.json()
            except ValueError:
                body = r.text
        else:
            body = r.text
        return cls(status_code=r.status_code, body=body)


class RequestsTransport:
    """
    GET/POST collaborator used by ApiClient. One optional requests.Session is reused for every call.
    """

    def __init__(self, timeout=TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
        try:
            r = sp_get(url, headers=headers or {}, timeout=self.timeout, session=self.session)
        except requests.RequestException as e:
            logger.warning("Spotify API: GET %s failed: %s", url, e)
            return TransportResponse(status_code=0, error=str(e))
        return self._wrap("GET", url, r)

    def post(self, url: str, data: Optional[dict] = None, headers: Optional[Dict[str, str]] = None) -> TransportResponse:
        try:
            r = sp_post_form(url, data=data or {}, headers=headers or {}, timeout=self.timeout, session=self.session)
        except requests.RequestException as e:
            logger.warning("Spotify API: POST %s failed: %s", url, e)
            return TransportResponse(status_code=0, error=str(e))
        return self._wrap("POST", url, r)

    def _wrap(self, method: str, url: str, r: requests.Response) -> TransportResponse:
        response = TransportResponse.from_requests(r)
        if not response.success():
            logger.warning("Spotify API: %s %s returned HTTP %s", method, url, response.status_code)
        return response

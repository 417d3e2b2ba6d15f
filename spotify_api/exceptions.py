# spotify_api/exceptions.py
'''
Exceptions for programmer and configuration errors.
Operational failures (no token, failed HTTP call) are returned as Result values instead.
'''

from __future__ import annotations


class SpotifyApiError(Exception):
    """Base class for errors raised by spotify_api."""


class ConfigurationError(SpotifyApiError):
    """A cache identifier, encryption key or setting could not be used."""


class ResultError(SpotifyApiError):
    """
    Raised by Result.unwrap() on a failed result. The Failure is kept on .failure.
    """

    def __init__(self, failure):
        self.failure = failure
        super().__init__(f"{failure.kind.value}: {failure.message}")

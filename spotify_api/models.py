# spotify_api/models.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar

from .exceptions import ResultError

T = TypeVar("T")


@dataclass(frozen=True)
class Token:
    """
    Access token as returned by the accounts endpoint: { access_token, token_type, expires_in, scope }.
    `raw` keeps the original response so it can be cached and handed back unchanged.
    """
    token_type: str
    access_token: str
    expires_in: Optional[int] = None
    scope: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> "Token":
        expires_in = data.get("expires_in")
        return cls(
            token_type=data.get("token_type") or "Bearer",
            access_token=data.get("access_token") or "",
            expires_in=int(expires_in) if expires_in is not None else None,
            scope=data.get("scope") or "",
            raw=dict(data),
        )

    @classmethod
    def from_body(cls, body: Any) -> Optional["Token"]:
        """
        Token from an accounts endpoint body (mapping, JSON text or JSON bytes).
        None when the body does not carry a usable access token.
        """
        if isinstance(body, (bytes, bytearray)):
            try:
                body = body.decode()
            except UnicodeDecodeError:
                return None
        if isinstance(body, str):
            try:
                body = json.loads(body) if body.lstrip().startswith("{") else None
            except ValueError:
                return None
        if not isinstance(body, Mapping):
            return None
        token = cls.from_response(body)
        return token if token.authorization else None

    @classmethod
    def coerce(cls, value: Any) -> Optional["Token"]:
        """
        Accepts a Token, a token response mapping, or a bare access token string (sent as Bearer).
        """
        if value is None or isinstance(value, Token):
            return value
        if isinstance(value, str):
            return cls(token_type="Bearer", access_token=value)
        if isinstance(value, Mapping):
            return cls.from_response(value)
        raise TypeError(f"Cannot build a Token from {type(value).__name__}")

    @property
    def authorization(self) -> str:
        """Value for the Authorization header, empty when there is no access token."""
        if not self.access_token:
            return ""
        return f"{self.token_type} {self.access_token}".strip()

    def as_dict(self) -> Dict[str, Any]:
        if self.raw:
            return dict(self.raw)
        data: Dict[str, Any] = {"token_type": self.token_type, "access_token": self.access_token}
        if self.expires_in is not None:
            data["expires_in"] = self.expires_in
        if self.scope:
            data["scope"] = self.scope
        return data


class FailureKind(str, Enum):
    MISSING_TOKEN = "missing_token"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str = ""
    status_code: Optional[int] = None

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a value or a Failure. Truthiness follows `ok`, so `{}` or `""` payloads still count as success.
    """
    value: Optional[T] = None
    failure: Optional[Failure] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str = "", status_code: Optional[int] = None) -> "Result[T]":
        return cls(failure=Failure(kind=kind, message=message, status_code=status_code))

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        if self.failure is not None:
            raise ResultError(self.failure)
        return self.value

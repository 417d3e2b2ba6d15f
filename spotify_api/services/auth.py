# spotify_api/services/auth.py
"""
Auth/service layer for the client-credentials grant.
- Builds the Basic authorization header from the application's client id and secret.
- Requests an application token from the accounts endpoint.
"""

from __future__ import annotations

import base64

from ..clients.spotify import TOKEN_URL, TransportResponse


def app_auth_header(client_id: str | None, client_secret: str | None) -> str:
    """
    base64("<client_id>:<client_secret>"), the credential part of the Basic header.
    """
    return base64.b64encode(f"{client_id or ''}:{client_secret or ''}".encode()).decode()


def request_app_token(transport, client_id: str | None, client_secret: str | None) -> TransportResponse:
    """
    POST grant_type=client_credentials to the token endpoint. Never raises; check .success().
    """
    headers = {
        "Authorization": f"Basic {app_auth_header(client_id, client_secret)}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    return transport.post(TOKEN_URL, {"grant_type": "client_credentials"}, headers)

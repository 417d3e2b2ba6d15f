# spotify_api/utils.py
import json
import os

from cryptography.fernet import Fernet, InvalidToken

from .exceptions import ConfigurationError

KEY_ENV_VARS = ("SPOTIFY_CACHE_FERNET_KEY", "FERNET_KEY")


def get_fernet(key=None) -> Fernet:
    if key is None:
        key = next((os.getenv(name) for name in KEY_ENV_VARS if os.getenv(name)), None)
    if not key:
        raise ConfigurationError(
            f"No encryption key: pass one explicitly or set {' or '.join(KEY_ENV_VARS)}"
        )
    try:
        return Fernet(key.encode() if isinstance(key, str) else key)
    except (ValueError, TypeError) as e:
        raise ConfigurationError(f"Invalid Fernet key: {e}") from e


def encrypt_value(fernet: Fernet, value) -> str:
    return fernet.encrypt(json.dumps(value).encode()).decode()


def decrypt_value(fernet: Fernet, token: str):
    """Returns the decoded value; raises InvalidToken if `token` was not produced with this key."""
    return json.loads(fernet.decrypt(token.encode()).decode())


__all__ = ["KEY_ENV_VARS", "InvalidToken", "get_fernet", "encrypt_value", "decrypt_value"]

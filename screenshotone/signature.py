"""
HMAC-SHA256 request signing.
"""
from __future__ import annotations

import hashlib
import hmac

from .errors import ConfigurationError

SIGNATURE_PARAM = "signature"


def compute_signature(query_string: str, secret_key: str) -> str:
    """
    Return the lowercase hex HMAC-SHA256 of `query_string` keyed by `secret_key`.

    The input must be the exact serialized query (access key included,
    signature excluded); the server recomputes it byte for byte.
    """

    if not isinstance(secret_key, str) or not secret_key:
        raise ConfigurationError("A non-empty secret key is required to sign requests.")
    if not isinstance(query_string, str):
        raise ConfigurationError("The query string to sign must be a str.")

    digest = hmac.new(secret_key.encode("utf-8"), query_string.encode("utf-8"), hashlib.sha256)
    return digest.hexdigest()


async def sign_query_string(query_string: str, secret_key: str) -> str:
    """Awaitable form of `compute_signature`, the one the client uses."""

    return compute_signature(query_string, secret_key)


__all__ = ["SIGNATURE_PARAM", "compute_signature", "sign_query_string"]

from __future__ import annotations

import pytest

from screenshotone.errors import ConfigurationError
from screenshotone.signature import compute_signature, sign_query_string

from .constants import BLOCK_ADS_QUERY, BLOCK_ADS_SIGNATURE, SECRET_KEY


def test_known_answer():
    assert compute_signature(BLOCK_ADS_QUERY, SECRET_KEY) == BLOCK_ADS_SIGNATURE


def test_signature_is_lowercase_hex_sha256():
    signature = compute_signature("a=1", "key")

    assert len(signature) == 64
    assert signature == signature.lower()
    int(signature, 16)


def test_parameter_order_changes_the_signature():
    assert compute_signature("a=1&b=2", SECRET_KEY) != compute_signature("b=2&a=1", SECRET_KEY)


@pytest.mark.parametrize("secret_key", ["", None])
def test_empty_key_fails_fast(secret_key):
    with pytest.raises(ConfigurationError):
        compute_signature(BLOCK_ADS_QUERY, secret_key)


@pytest.mark.asyncio
async def test_async_signer_matches_sync():
    assert await sign_query_string(BLOCK_ADS_QUERY, SECRET_KEY) == BLOCK_ADS_SIGNATURE

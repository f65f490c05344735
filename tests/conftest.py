from __future__ import annotations

import pytest

from screenshotone import Client

from .constants import ACCESS_KEY, SECRET_KEY


@pytest.fixture
def client() -> Client:
    return Client(ACCESS_KEY, SECRET_KEY)

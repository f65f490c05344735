from __future__ import annotations

import pytest
from pydantic import ValidationError

from screenshotone.config import ClientConfig, load_config
from screenshotone.errors import ConfigurationError

from .constants import ACCESS_KEY, SECRET_KEY


def test_from_env_reads_variables():
    config = ClientConfig.from_env(
        {
            "SCREENSHOTONE_ACCESS_KEY": ACCESS_KEY,
            "SCREENSHOTONE_SECRET_KEY": SECRET_KEY,
            "SCREENSHOTONE_BASE_URL": "http://localhost:9000",
        }
    )

    assert config.access_key == ACCESS_KEY
    assert config.secret_key == SECRET_KEY
    assert config.base_url == "http://localhost:9000"
    assert config.timeout == 60.0


def test_overrides_win_over_environment():
    config = ClientConfig.from_env(
        {"SCREENSHOTONE_ACCESS_KEY": "env-key", "SCREENSHOTONE_SECRET_KEY": "env-secret"},
        access_key=ACCESS_KEY,
        secret_key=None,
    )

    assert config.access_key == ACCESS_KEY
    assert config.secret_key == "env-secret"


def test_missing_credentials_raise_configuration_error():
    with pytest.raises(ConfigurationError) as exc_info:
        ClientConfig.from_env({})

    message = exc_info.value.message
    assert "access_key" in message
    assert "secret_key" in message


def test_secret_key_is_hidden_from_repr_and_error_details():
    config = load_config({"access_key": ACCESS_KEY, "secret_key": SECRET_KEY})
    assert SECRET_KEY not in repr(config)

    with pytest.raises(ConfigurationError) as exc_info:
        load_config({"access_key": ACCESS_KEY, "secret_key": SECRET_KEY, "timeout": 0})
    assert SECRET_KEY not in str(exc_info.value.to_payload())


def test_config_is_frozen():
    config = load_config({"access_key": ACCESS_KEY, "secret_key": SECRET_KEY})

    with pytest.raises(ValidationError):
        config.access_key = "other"  # type: ignore[misc]

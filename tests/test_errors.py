from __future__ import annotations

from screenshotone.errors import (
    APIError,
    ConfigurationError,
    ErrorCode,
    ScreenshotOneError,
    TransportError,
    to_error_payload,
)


def test_api_error_payload():
    error = APIError(
        "failed to take, the API returned 400 Bad Request: nope",
        http_status_code=400,
        error_code="name_not_resolved",
        error_message="nope",
        documentation_url="https://screenshotone.com/docs/errors/",
    )

    assert isinstance(error, ScreenshotOneError)
    assert error.to_payload() == {
        "code": "API_ERROR",
        "message": "failed to take, the API returned 400 Bad Request: nope",
        "details": {
            "http_status_code": 400,
            "error_code": "name_not_resolved",
            "error_message": "nope",
            "documentation_url": "https://screenshotone.com/docs/errors/",
        },
    }


def test_transport_error_without_status_has_no_details():
    error = TransportError("request to /take failed: timed out")

    assert error.http_status_code is None
    assert error.to_payload() == {"code": "TRANSPORT_ERROR", "message": "request to /take failed: timed out"}


def test_configuration_error_is_a_value_error():
    error = ConfigurationError("missing key")

    assert isinstance(error, ValueError)
    assert error.code is ErrorCode.CONFIGURATION_ERROR
    assert str(error) == "CONFIGURATION_ERROR: missing key"


def test_to_error_payload_for_foreign_exceptions():
    assert to_error_payload(RuntimeError("boom")) == {"code": "INTERNAL_ERROR", "message": "boom"}
    assert to_error_payload(RuntimeError()) == {"code": "INTERNAL_ERROR", "message": "Internal error"}

"""
Error definitions and helper utilities for the ScreenshotOne client.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, MutableMapping, Optional


class ErrorCode(str, Enum):
    """Stable client-side error categories."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    API_ERROR = "API_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ScreenshotOneError(Exception):
    """
    Base class for every error raised by the client.

    Subclasses carry a stable `code` so callers (and the CLI) can render a
    uniform payload without inspecting the concrete type.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> MutableMapping[str, Any]:
        payload: MutableMapping[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ConfigurationError(ScreenshotOneError, ValueError):
    """Missing or empty credentials, or an unusable signing key."""

    code = ErrorCode.CONFIGURATION_ERROR


class APIError(ScreenshotOneError):
    """
    The API answered with a non-2xx status and a structured error body.
    """

    code = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        http_status_code: int,
        error_code: str,
        error_message: str,
        documentation_url: str,
    ) -> None:
        super().__init__(message)
        self.http_status_code = http_status_code
        self.error_code = error_code
        self.error_message = error_message
        self.documentation_url = documentation_url

    def to_payload(self) -> MutableMapping[str, Any]:
        payload = super().to_payload()
        payload["details"] = {
            "http_status_code": self.http_status_code,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "documentation_url": self.documentation_url,
        }
        return payload


class TransportError(ScreenshotOneError):
    """
    The request failed without a usable error body.

    `http_status_code` is `None` when no response was received at all.
    """

    code = ErrorCode.TRANSPORT_ERROR

    def __init__(self, message: str, http_status_code: Optional[int] = None) -> None:
        details = {"http_status_code": http_status_code} if http_status_code is not None else None
        super().__init__(message, details)
        self.http_status_code = http_status_code


def to_error_payload(exc: Exception) -> Mapping[str, Any]:
    """
    Convert any exception to a uniform error payload.
    """

    if isinstance(exc, ScreenshotOneError):
        return exc.to_payload()
    return {
        "code": ErrorCode.INTERNAL_ERROR.value,
        "message": str(exc) or "Internal error",
    }


__all__ = [
    "APIError",
    "ConfigurationError",
    "ErrorCode",
    "ScreenshotOneError",
    "TransportError",
    "to_error_payload",
]

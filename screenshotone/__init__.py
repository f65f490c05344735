"""
Python client for the ScreenshotOne screenshot and animation API.
"""
from __future__ import annotations

from .client import Client, StoredAsset
from .config import ClientConfig
from .errors import APIError, ConfigurationError, ErrorCode, ScreenshotOneError, TransportError
from .options import AnimateOptions, RequestKind, TakeOptions
from .query import QueryParams
from .signature import compute_signature, sign_query_string

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "AnimateOptions",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "ErrorCode",
    "QueryParams",
    "RequestKind",
    "ScreenshotOneError",
    "StoredAsset",
    "TakeOptions",
    "TransportError",
    "compute_signature",
    "sign_query_string",
]

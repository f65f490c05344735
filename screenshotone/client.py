"""
Async client for the ScreenshotOne rendering API.

The client turns an options builder into a signed request URL, performs the
GET with httpx and maps non-2xx answers onto the error taxonomy in
`screenshotone.errors`.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Mapping, Optional

import httpx
from pydantic import BaseModel, ValidationError

from .config import API_BASE_URL, DEFAULT_TIMEOUT, ClientConfig, load_config
from .errors import APIError, TransportError
from .logging_conf import get_logger
from .options import AnimateOptions, Options, RequestKind, TakeOptions
from .query import QueryParams
from .signature import SIGNATURE_PARAM, sign_query_string

API_PATHS: Mapping[RequestKind, str] = {
    RequestKind.TAKE: "/take",
    RequestKind.ANIMATE: "/animate",
}

ACCESS_KEY_PARAM = "access_key"
STORE_BUCKET_HEADER = "X-ScreenshotOne-Store-Bucket"
STORE_KEY_HEADER = "X-ScreenshotOne-Store-Key"


class ErrorResponse(BaseModel):
    """JSON body the API sends along with a non-2xx status."""

    error_code: str
    error_message: str
    documentation_url: str


@dataclass(frozen=True)
class StoredAsset:
    """Location of an asset the API uploaded to storage."""

    bucket: Optional[str]
    key: Optional[str]


def _duration_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _error_from_response(response: httpx.Response, kind: RequestKind) -> Exception:
    status_line = f"{response.status_code} {response.reason_phrase}".strip()
    try:
        body = ErrorResponse.model_validate_json(response.content)
    except ValidationError:
        return TransportError(status_line, http_status_code=response.status_code)

    return APIError(
        f"failed to {kind.value}, the API returned {status_line}: {body.error_message}",
        http_status_code=response.status_code,
        error_code=body.error_code,
        error_message=body.error_message,
        documentation_url=body.documentation_url,
    )


class Client:
    """
    Holds the credentials and performs signed requests.

    Each call opens its own `httpx.AsyncClient`; nothing mutable is shared
    between calls, so concurrent requests do not interfere.
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        *,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config: ClientConfig = load_config(
            {
                "access_key": access_key,
                "secret_key": secret_key,
                "base_url": base_url,
                "timeout": timeout,
            }
        )
        self._transport = transport
        self.logger = get_logger("screenshotone.client")

    @classmethod
    def from_config(cls, config: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None) -> "Client":
        return cls(
            config.access_key,
            config.secret_key,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "Client":
        """Create a client from the `SCREENSHOTONE_*` environment variables."""

        return cls.from_config(ClientConfig.from_env(environ), transport=transport)

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------

    def _endpoint(self, kind: RequestKind) -> str:
        return self.config.base_url.rstrip("/") + API_PATHS[kind]

    def _query(self, options: Options) -> QueryParams:
        # to_query() hands back a copy, so the caller's options stay untouched.
        query = options.to_query()
        query.append(ACCESS_KEY_PARAM, self.config.access_key)
        return query

    def build_url(self, options: Options) -> str:
        """Return the unsigned request URL for `options`."""

        return f"{self._endpoint(options.kind)}?{self._query(options).encode()}"

    async def build_signed_url(self, options: Options) -> str:
        """
        Return the request URL with `signature` appended as the last parameter.

        The signature covers the serialized query exactly as it appears in
        the URL, access key included.
        """

        query_string = self._query(options).encode()
        signature = await sign_query_string(query_string, self.config.secret_key)
        return f"{self._endpoint(options.kind)}?{query_string}&{SIGNATURE_PARAM}={signature}"

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def _get(self, options: Options) -> httpx.Response:
        url = await self.build_signed_url(options)
        path = API_PATHS[options.kind]
        start = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport) as http:
                response = await http.get(url)
        except httpx.RequestError as exc:
            raise TransportError(f"request to {path} failed: {exc}") from exc

        self.logger.debug(
            "api_response",
            extra={
                "path": path,
                "status_code": response.status_code,
                "duration_ms": _duration_ms(start),
            },
        )
        if not response.is_success:
            raise _error_from_response(response, options.kind)
        return response

    async def fetch_asset(self, options: Options) -> bytes:
        """
        Render `options` and return the raw asset bytes.

        Raises APIError when the API explains the failure, TransportError
        otherwise.
        """

        response = await self._get(options)
        return response.content

    async def take(self, options: TakeOptions) -> bytes:
        """Capture a static screenshot."""

        if options.kind is not RequestKind.TAKE:
            raise TypeError(f"take() expects TakeOptions, got {type(options).__name__}")
        return await self.fetch_asset(options)

    async def animate(self, options: AnimateOptions) -> bytes:
        """Record an animation or scrolling video."""

        if options.kind is not RequestKind.ANIMATE:
            raise TypeError(f"animate() expects AnimateOptions, got {type(options).__name__}")
        return await self.fetch_asset(options)

    async def store(
        self,
        options: Options,
        path: str,
        *,
        bucket: Optional[str] = None,
        acl: Optional[str] = None,
        storage_class: Optional[str] = None,
    ) -> StoredAsset:
        """
        Render `options` and have the API upload the result to storage.

        `options` is updated in place with the storage parameters. The bucket
        and object key reported by the API are returned.
        """

        options.store(True).storage_path(path).response_type("empty")
        if bucket is not None:
            options.storage_bucket(bucket)
        if acl is not None:
            options.storage_acl(acl)
        if storage_class is not None:
            options.storage_class(storage_class)

        response = await self._get(options)
        return StoredAsset(
            bucket=response.headers.get(STORE_BUCKET_HEADER),
            key=response.headers.get(STORE_KEY_HEADER),
        )


__all__ = [
    "ACCESS_KEY_PARAM",
    "API_PATHS",
    "Client",
    "ErrorResponse",
    "STORE_BUCKET_HEADER",
    "STORE_KEY_HEADER",
    "StoredAsset",
]

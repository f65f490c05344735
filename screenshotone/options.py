"""
Fluent builders for screenshot and animation request options.

Both variants share one parameter core (`BaseOptions`) and differ only by
their extra setters and the `kind` discriminator the client uses to pick
the request path.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import ClassVar, Self, Union

from .query import QueryParams

Number = Union[int, float, Decimal]


class RequestKind(str, Enum):
    """Discriminator for the two option variants."""

    TAKE = "take"
    ANIMATE = "animate"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_number(value: Number) -> str:
    """Decimal string conversion; integral floats render without `.0`."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_coordinate(value: Number) -> str:
    """
    Fixed-point rendering for geolocation coordinates.

    Expands to 20 fractional digits through `Decimal` (never exponential
    notation) and strips trailing zeros together with a dangling point.
    """

    decimal_value = value if isinstance(value, Decimal) else Decimal(repr(float(value)))
    text = f"{decimal_value:.20f}"
    text = text.rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class BaseOptions:
    """
    Parameters shared by screenshots and animations.

    Instances are created through `url()`, `html()` or `markdown()`; every
    setter owns exactly one key and returns the instance for chaining.
    """

    kind: ClassVar[RequestKind]

    def __init__(self, source_key: str, content: str) -> None:
        self._query = QueryParams()
        self._query.set(source_key, content)

    @classmethod
    def url(cls, url: str) -> Self:
        """Render the page at `url`."""
        return cls("url", url)

    @classmethod
    def html(cls, html: str) -> Self:
        """Render an inline HTML document."""
        return cls("html", html)

    @classmethod
    def markdown(cls, markdown: str) -> Self:
        """Render an inline Markdown document."""
        return cls("markdown", markdown)

    def _set(self, key: str, value: str) -> Self:
        self._query.set(key, value)
        return self

    def _append(self, key: str, *values: str) -> Self:
        self._query.append(key, *values)
        return self

    def to_query(self) -> QueryParams:
        """Return an independent snapshot of the accumulated parameters."""
        return self._query.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._query!r})"

    # -- page customization -------------------------------------------------

    def selector(self, selector: str) -> Self:
        """CSS-like selector of the element to capture."""
        return self._set("selector", selector)

    def styles(self, styles: str) -> Self:
        """Custom CSS injected into the page."""
        return self._set("styles", styles)

    def scripts(self, scripts: str) -> Self:
        """Custom JavaScript executed on the page."""
        return self._set("scripts", scripts)

    def scripts_wait_until(self, *events: str) -> Self:
        return self._append("scripts_wait_until", *events)

    def hide_selectors(self, *selectors: str) -> Self:
        """Hide every element matching one of the selectors."""
        return self._append("hide_selectors", *selectors)

    def click(self, selector: str) -> Self:
        return self._set("click", selector)

    def dark_mode(self, dark_mode: bool) -> Self:
        return self._set("dark_mode", format_bool(dark_mode))

    def reduced_motion(self, reduced_motion: bool) -> Self:
        return self._set("reduced_motion", format_bool(reduced_motion))

    def media_type(self, media_type: str) -> Self:
        """Emulated CSS media type: "screen" or "print"."""
        return self._set("media_type", media_type)

    # -- viewport -----------------------------------------------------------

    def viewport_width(self, width: int) -> Self:
        """Width of the browser viewport in pixels."""
        return self._set("viewport_width", format_number(width))

    def viewport_height(self, height: int) -> Self:
        """Height of the browser viewport in pixels."""
        return self._set("viewport_height", format_number(height))

    def viewport_device(self, device: str) -> Self:
        return self._set("viewport_device", device)

    def viewport_mobile(self, mobile: bool) -> Self:
        return self._set("viewport_mobile", format_bool(mobile))

    def viewport_has_touch(self, has_touch: bool) -> Self:
        return self._set("viewport_has_touch", format_bool(has_touch))

    def viewport_landscape(self, landscape: bool) -> Self:
        return self._set("viewport_landscape", format_bool(landscape))

    def device_scale_factor(self, factor: Number) -> Self:
        """Device scale factor, usually 1, 2 or 3."""
        return self._set("device_scale_factor", format_number(factor))

    # -- emulation ----------------------------------------------------------

    def geolocation_latitude(self, latitude: Number) -> Self:
        """
        Latitude for the emulated geolocation.

        Both latitude and longitude are required if one of them is set.
        """
        return self._set("geolocation_latitude", format_coordinate(latitude))

    def geolocation_longitude(self, longitude: Number) -> Self:
        """
        Longitude for the emulated geolocation.

        Both latitude and longitude are required if one of them is set.
        """
        return self._set("geolocation_longitude", format_coordinate(longitude))

    def geolocation_accuracy(self, accuracy: Number) -> Self:
        """Geolocation accuracy in meters."""
        return self._set("geolocation_accuracy", format_number(accuracy))

    def time_zone(self, time_zone: str) -> Self:
        """IANA time zone, e.g. "Europe/Berlin"."""
        return self._set("time_zone", time_zone)

    def ip_country_code(self, country_code: str) -> Self:
        return self._set("ip_country_code", country_code)

    def proxy(self, proxy: str) -> Self:
        return self._set("proxy", proxy)

    def bypass_csp(self, bypass: bool) -> Self:
        return self._set("bypass_csp", format_bool(bypass))

    # -- blocking -----------------------------------------------------------

    def block_ads(self, block: bool) -> Self:
        return self._set("block_ads", format_bool(block))

    def block_cookie_banners(self, block: bool) -> Self:
        return self._set("block_cookie_banners", format_bool(block))

    def block_chats(self, block: bool) -> Self:
        return self._set("block_chats", format_bool(block))

    def block_trackers(self, block: bool) -> Self:
        return self._set("block_trackers", format_bool(block))

    def block_requests(self, *patterns: str) -> Self:
        """Block requests by URL, domain or a simple pattern."""
        return self._append("block_requests", *patterns)

    def block_resources(self, *resource_types: str) -> Self:
        """
        Block resources by type.

        Known types: "document", "stylesheet", "image", "media", "font",
        "script", "texttrack", "xhr", "fetch", "eventsource", "websocket",
        "manifest", "other".
        """
        return self._append("block_resources", *resource_types)

    # -- request ------------------------------------------------------------

    def user_agent(self, user_agent: str) -> Self:
        return self._set("user_agent", user_agent)

    def authorization(self, authorization: str) -> Self:
        """Value of the Authorization header sent to the target site."""
        return self._set("authorization", authorization)

    def cookies(self, *cookies: str) -> Self:
        return self._append("cookies", *cookies)

    def headers(self, *headers: str) -> Self:
        """Extra "Name: value" headers sent to the target site."""
        return self._append("headers", *headers)

    # -- caching ------------------------------------------------------------

    def cache(self, cache: bool) -> Self:
        return self._set("cache", format_bool(cache))

    def cache_ttl(self, seconds: int) -> Self:
        return self._set("cache_ttl", format_number(seconds))

    def cache_key(self, key: str) -> Self:
        return self._set("cache_key", key)

    # -- timing -------------------------------------------------------------

    def delay(self, seconds: Number) -> Self:
        return self._set("delay", format_number(seconds))

    def timeout(self, seconds: Number) -> Self:
        """How long the renderer waits before giving up. Does not bound the local call."""
        return self._set("timeout", format_number(seconds))

    def navigation_timeout(self, seconds: Number) -> Self:
        return self._set("navigation_timeout", format_number(seconds))

    def wait_until(self, *events: str) -> Self:
        """Navigation events to wait for, e.g. "load" or "networkidle0"."""
        return self._append("wait_until", *events)

    def wait_for_selector(self, selector: str) -> Self:
        return self._set("wait_for_selector", selector)

    # -- response and storage -----------------------------------------------

    def response_type(self, response_type: str) -> Self:
        """"by_format", "json" or "empty"."""
        return self._set("response_type", response_type)

    def store(self, store: bool) -> Self:
        """Upload the rendered asset to the configured storage."""
        return self._set("store", format_bool(store))

    def storage_path(self, path: str) -> Self:
        """Object key (without extension) used when storing."""
        return self._set("storage_path", path)

    def storage_bucket(self, bucket: str) -> Self:
        return self._set("storage_bucket", bucket)

    def storage_acl(self, acl: str) -> Self:
        return self._set("storage_acl", acl)

    def storage_class(self, storage_class: str) -> Self:
        return self._set("storage_class", storage_class)

    def storage_endpoint(self, endpoint: str) -> Self:
        return self._set("storage_endpoint", endpoint)

    def storage_access_key_id(self, access_key_id: str) -> Self:
        return self._set("storage_access_key_id", access_key_id)

    def storage_secret_access_key(self, secret_access_key: str) -> Self:
        return self._set("storage_secret_access_key", secret_access_key)

    def storage_return_location(self, return_location: bool) -> Self:
        return self._set("storage_return_location", format_bool(return_location))

    def metadata_image_size(self, enabled: bool) -> Self:
        return self._set("metadata_image_size", format_bool(enabled))

    def metadata_page_title(self, enabled: bool) -> Self:
        return self._set("metadata_page_title", format_bool(enabled))

    def async_(self, enabled: bool) -> Self:
        """Return immediately and render in the background (`async` parameter)."""
        return self._set("async", format_bool(enabled))

    def webhook_url(self, url: str) -> Self:
        return self._set("webhook_url", url)

    def webhook_sign(self, sign: bool) -> Self:
        return self._set("webhook_sign", format_bool(sign))


class TakeOptions(BaseOptions):
    """Options for a static screenshot (`/take`)."""

    kind = RequestKind.TAKE

    def error_on_selector_not_found(self, error_on: bool) -> Self:
        """Fail instead of capturing the full viewport when `selector` is missing."""
        return self._set("error_on_selector_not_found", format_bool(error_on))

    def full_page(self, full_page: bool) -> Self:
        """Render the full page."""
        return self._set("full_page", format_bool(full_page))

    def full_page_scroll(self, scroll: bool) -> Self:
        return self._set("full_page_scroll", format_bool(scroll))

    def full_page_max_height(self, height: int) -> Self:
        return self._set("full_page_max_height", format_number(height))

    def format(self, image_format: str) -> Self:
        """Response format: "png", "jpeg", "jpg", "webp", "pdf", ..."""
        return self._set("format", image_format)

    def image_quality(self, quality: int) -> Self:
        """Quality for lossy formats ("jpeg", "jpg", "webp")."""
        return self._set("image_quality", format_number(quality))

    def image_width(self, width: int) -> Self:
        return self._set("image_width", format_number(width))

    def image_height(self, height: int) -> Self:
        return self._set("image_height", format_number(height))

    def omit_background(self, omit: bool) -> Self:
        """
        Render a transparent background ("png" and "webp" only).

        Has no effect when the page defines its own background color.
        """
        return self._set("omit_background", format_bool(omit))

    def clip_x(self, x: int) -> Self:
        return self._set("clip_x", format_number(x))

    def clip_y(self, y: int) -> Self:
        return self._set("clip_y", format_number(y))

    def clip_width(self, width: int) -> Self:
        return self._set("clip_width", format_number(width))

    def clip_height(self, height: int) -> Self:
        return self._set("clip_height", format_number(height))


class AnimateOptions(BaseOptions):
    """Options for a scrolling/recorded animation (`/animate`)."""

    kind = RequestKind.ANIMATE

    def scenario(self, scenario: str) -> Self:
        """"default" (plain recording) or "scroll"."""
        return self._set("scenario", scenario)

    def format(self, video_format: str) -> Self:
        """Response format: "mp4", "mov", "avi", "webm" or "gif"."""
        return self._set("format", video_format)

    def duration(self, seconds: Number) -> Self:
        return self._set("duration", format_number(seconds))

    def width(self, width: int) -> Self:
        return self._set("width", format_number(width))

    def height(self, height: int) -> Self:
        return self._set("height", format_number(height))

    def scroll_delay(self, milliseconds: int) -> Self:
        return self._set("scroll_delay", format_number(milliseconds))

    def scroll_duration(self, milliseconds: int) -> Self:
        return self._set("scroll_duration", format_number(milliseconds))

    def scroll_by(self, pixels: int) -> Self:
        return self._set("scroll_by", format_number(pixels))

    def scroll_start_immediately(self, start: bool) -> Self:
        return self._set("scroll_start_immediately", format_bool(start))

    def scroll_start_delay(self, milliseconds: int) -> Self:
        return self._set("scroll_start_delay", format_number(milliseconds))

    def scroll_complete(self, complete: bool) -> Self:
        return self._set("scroll_complete", format_bool(complete))

    def scroll_back(self, back: bool) -> Self:
        return self._set("scroll_back", format_bool(back))

    def scroll_back_after_duration(self, milliseconds: int) -> Self:
        return self._set("scroll_back_after_duration", format_number(milliseconds))

    def scroll_back_delay(self, milliseconds: int) -> Self:
        return self._set("scroll_back_delay", format_number(milliseconds))

    def scroll_easing(self, easing: str) -> Self:
        return self._set("scroll_easing", easing)

    def scroll_stop_after_duration(self, milliseconds: int) -> Self:
        return self._set("scroll_stop_after_duration", format_number(milliseconds))

    def scroll_try_navigate(self, navigate: bool) -> Self:
        return self._set("scroll_try_navigate", format_bool(navigate))

    def scroll_navigate_after(self, milliseconds: int) -> Self:
        return self._set("scroll_navigate_after", format_number(milliseconds))

    def scroll_navigate_to_url(self, url: str) -> Self:
        return self._set("scroll_navigate_to_url", url)

    def scroll_navigate_link_hints(self, *hints: str) -> Self:
        return self._append("scroll_navigate_link_hints", *hints)


Options = Union[TakeOptions, AnimateOptions]


__all__ = [
    "AnimateOptions",
    "BaseOptions",
    "Options",
    "RequestKind",
    "TakeOptions",
    "format_bool",
    "format_coordinate",
    "format_number",
]

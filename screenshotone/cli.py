"""
Command-line interface for the ScreenshotOne client.

Renders one request described by a JSON configuration file and saves the
asset, stores it remotely, or just prints the request URL.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Sequence

import orjson
from pydantic import BaseModel, Field, ValidationError, model_validator

from .client import Client
from .config import ClientConfig
from .errors import ConfigurationError, ScreenshotOneError, to_error_payload
from .logging_conf import configure_logging, get_logger
from .options import AnimateOptions, Options, TakeOptions

logger = get_logger("screenshotone.cli")

OPTION_CLASSES = {"take": TakeOptions, "animate": AnimateOptions}
NOT_SETTERS = frozenset({"url", "html", "markdown", "to_query"})


class RequestFile(BaseModel):
    """Shape of the JSON configuration file."""

    kind: Literal["take", "animate"] = "take"
    source: Dict[str, str] = Field(description="Exactly one of: url, html, markdown.")
    options: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _single_source(self) -> "RequestFile":
        if len(self.source) != 1 or next(iter(self.source)) not in {"url", "html", "markdown"}:
            raise ValueError("source must hold exactly one of 'url', 'html' or 'markdown'")
        return self


def build_options(request: RequestFile) -> Options:
    """
    Apply the configuration file to a fresh options builder.

    Each entry in `options` names a setter; list values are spread over
    multi-value setters.
    """

    options_class = OPTION_CLASSES[request.kind]
    source_kind, content = next(iter(request.source.items()))
    options: Options = getattr(options_class, source_kind)(content)

    for name, value in request.options.items():
        setter_name = "async_" if name == "async" else name
        setter = getattr(options, setter_name, None)
        if name.startswith("_") or name in NOT_SETTERS or not callable(setter):
            raise ConfigurationError(f"Unknown {request.kind} option: {name}")
        if isinstance(value, list):
            setter(*value)
        else:
            setter(value)
    return options


def load_request_file(config_path: str) -> RequestFile:
    """
    Load a request description from a JSON file.

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        Validated RequestFile instance
    """
    payload = Path(config_path).read_bytes()
    try:
        return RequestFile.model_validate_json(payload)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid configuration file: {config_path}",
            {"validation_errors": exc.errors(include_input=False, include_context=False, include_url=False)},
        ) from exc


def default_output(request: RequestFile) -> str:
    default_format = "png" if request.kind == "take" else "mp4"
    return f"screenshot.{request.options.get('format', default_format)}"


async def run(args: argparse.Namespace) -> int:
    request = load_request_file(args.config)
    options = build_options(request)
    config = ClientConfig.from_env(access_key=args.access_key, secret_key=args.secret_key)
    client = Client.from_config(config)

    if args.url_only:
        url = client.build_url(options) if args.unsigned else await client.build_signed_url(options)
        print(url)
        return 0

    if args.store:
        stored = await client.store(options, args.store)
        logger.info("asset_stored", extra={"bucket": stored.bucket, "key": stored.key})
        print(orjson.dumps({"bucket": stored.bucket, "key": stored.key}).decode("utf-8"))
        return 0

    output = Path(args.output or default_output(request))
    asset = await client.fetch_asset(options)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(asset)
    logger.info("asset_saved", extra={"path": str(output), "size": len(asset)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screenshotone",
        description="Render screenshots and animations through the ScreenshotOne API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Save a screenshot described by a config file
  screenshotone --config request.json --output example.png

  # Print the signed URL without calling the API
  screenshotone --config request.json --url-only

Configuration file format:
{
  "kind": "take",
  "source": {"url": "https://example.com"},
  "options": {
    "full_page": true,
    "block_ads": true,
    "hide_selectors": [".cookie-banner", "#chat"]
  }
}

Credentials default to SCREENSHOTONE_ACCESS_KEY and SCREENSHOTONE_SECRET_KEY.
        """,
    )

    parser.add_argument("--config", required=True, help="Path to JSON configuration file")
    parser.add_argument("--output", help="Where to save the asset (default: screenshot.<format>)")
    parser.add_argument("--store", metavar="PATH", help="Store the asset remotely under PATH instead of downloading it")
    parser.add_argument("--url-only", action="store_true", help="Print the request URL and exit")
    parser.add_argument("--unsigned", action="store_true", help="With --url-only, omit the signature")
    parser.add_argument("--access-key", help="Access key (or set SCREENSHOTONE_ACCESS_KEY)")
    parser.add_argument("--secret-key", help="Secret key (or set SCREENSHOTONE_SECRET_KEY)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""

    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        return asyncio.run(run(args))
    except FileNotFoundError:
        print(f"ERROR: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except ScreenshotOneError as exc:
        sys.stderr.write(orjson.dumps(to_error_payload(exc)).decode("utf-8") + "\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Demonstration script for the ScreenshotOne client.

It runs a short scenario against the live API:
  1. Print the signed URL for a full-page screenshot of example.com
  2. Download that screenshot
  3. Record a short scrolling animation of the same page
  4. Show how a structured API error surfaces

Credentials come from SCREENSHOTONE_ACCESS_KEY / SCREENSHOTONE_SECRET_KEY.
"""
from __future__ import annotations

import asyncio
from pathlib import Path

from screenshotone import AnimateOptions, APIError, Client, ScreenshotOneError, TakeOptions
from screenshotone.logging_conf import configure_logging

OUTPUT_DIR = Path(__file__).resolve().parent


def save_asset(asset: bytes, path: Path) -> None:
    """Persist a rendered asset to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(asset)


async def main() -> None:
    client = Client.from_env()

    # Step 1: build the request without sending it.
    screenshot = (
        TakeOptions.url("https://example.com/")
        .full_page(True)
        .block_ads(True)
        .block_cookie_banners(True)
        .format("png")
    )
    print(await client.build_signed_url(screenshot))

    # Step 2: grab the screenshot.
    save_asset(await client.take(screenshot), OUTPUT_DIR / "1_full_page.png")
    print("Saved demo/1_full_page.png")

    # Step 3: record a scroll-through video.
    animation = AnimateOptions.url("https://example.com/").scenario("scroll").duration(5).format("mp4")
    save_asset(await client.animate(animation), OUTPUT_DIR / "2_scroll.mp4")
    print("Saved demo/2_scroll.mp4")

    # Step 4: an unresolvable host comes back as a structured error.
    try:
        await client.take(TakeOptions.url("https://does-not-exist.invalid/"))
    except APIError as exc:
        print(f"API refused the request ({exc.error_code}): {exc.documentation_url}")


if __name__ == "__main__":
    configure_logging()
    try:
        asyncio.run(main())
    except ScreenshotOneError as exc:
        print(f"[demo] {exc}")
        print("Aborting scenario. Check the credentials or retry later.")
        raise SystemExit(1)

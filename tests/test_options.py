from __future__ import annotations

from decimal import Decimal

import pytest

from screenshotone.options import (
    AnimateOptions,
    RequestKind,
    TakeOptions,
    format_coordinate,
    format_number,
)


@pytest.mark.parametrize("options_class", [TakeOptions, AnimateOptions])
@pytest.mark.parametrize("source", ["url", "html", "markdown"])
def test_named_constructors_select_the_source_key(options_class, source):
    options = getattr(options_class, source)("<content>")

    assert list(options.to_query()) == [(source, "<content>")]


def test_variants_carry_their_discriminator():
    assert TakeOptions.url("https://example.com").kind is RequestKind.TAKE
    assert AnimateOptions.url("https://example.com").kind is RequestKind.ANIMATE


@pytest.mark.parametrize("options_class", [TakeOptions, AnimateOptions])
def test_repeated_single_value_setter_keeps_one_occurrence(options_class):
    options = options_class.url("https://example.com").block_ads(True).block_ads(True)

    query = options.to_query()
    assert query.get_all("block_ads") == ["true"]
    assert query.encode().count("block_ads=") == 1


def test_overwrite_keeps_original_position():
    options = TakeOptions.url("https://example.com").block_ads(True).full_page(True).block_ads(False)

    assert list(options.to_query()) == [
        ("url", "https://example.com"),
        ("block_ads", "false"),
        ("full_page", "true"),
    ]


def test_multi_value_setters_append_in_order():
    options = (
        TakeOptions.url("https://example.com")
        .hide_selectors(".banner", "#chat")
        .headers("X-Test: 1")
        .hide_selectors(".banner")
        .cookies("a=1", "b=2")
        .block_resources("image", "font")
        .block_requests("*.doubleclick.net")
        .wait_until("load", "networkidle0")
    )

    query = options.to_query()
    assert query.get_all("hide_selectors") == [".banner", "#chat", ".banner"]
    assert query.get_all("headers") == ["X-Test: 1"]
    assert query.get_all("cookies") == ["a=1", "b=2"]
    assert query.get_all("block_resources") == ["image", "font"]
    assert query.get_all("wait_until") == ["load", "networkidle0"]


def test_setters_serialize_booleans_and_numbers():
    options = (
        TakeOptions.url("https://example.com")
        .full_page(False)
        .viewport_width(1280)
        .device_scale_factor(2.0)
        .delay(1.5)
        .image_quality(80)
        .format("jpg")
    )

    query = options.to_query()
    assert query.get("full_page") == "false"
    assert query.get("viewport_width") == "1280"
    assert query.get("device_scale_factor") == "2"
    assert query.get("delay") == "1.5"
    assert query.get("image_quality") == "80"
    assert query.get("format") == "jpg"


def test_animation_specific_setters():
    options = (
        AnimateOptions.url("https://example.com")
        .scenario("scroll")
        .format("mp4")
        .duration(5)
        .scroll_back(True)
        .scroll_easing("ease_in_out_quint")
        .scroll_navigate_link_hints("pricing", "about")
    )

    assert list(options.to_query())[1:] == [
        ("scenario", "scroll"),
        ("format", "mp4"),
        ("duration", "5"),
        ("scroll_back", "true"),
        ("scroll_easing", "ease_in_out_quint"),
        ("scroll_navigate_link_hints", "pricing"),
        ("scroll_navigate_link_hints", "about"),
    ]


def test_variant_key_sets_stay_separate():
    assert not hasattr(AnimateOptions, "full_page_max_height")
    assert not hasattr(TakeOptions, "scroll_duration")


def test_async_setter_writes_reserved_word_key():
    options = TakeOptions.url("https://example.com").async_(True)

    assert options.to_query().get("async") == "true"


def test_snapshot_is_independent_of_later_mutation():
    options = TakeOptions.url("https://example.com")
    snapshot = options.to_query()

    options.block_ads(True)
    snapshot.append("access_key", "key")

    assert list(snapshot) == [("url", "https://example.com"), ("access_key", "key")]
    assert list(options.to_query()) == [("url", "https://example.com"), ("block_ads", "true")]


@pytest.mark.parametrize(
    "value, expected",
    [
        (40.0, "40"),
        (40, "40"),
        (40.7128, "40.7128"),
        (-74.006, "-74.006"),
        (0.1, "0.1"),
        (1e-7, "0.0000001"),
        (0.0, "0"),
        (Decimal("51.50000"), "51.5"),
    ],
)
def test_format_coordinate_is_fixed_point(value, expected):
    formatted = format_coordinate(value)

    assert formatted == expected
    assert "e" not in formatted.lower()


def test_geolocation_setters_use_fixed_point():
    options = TakeOptions.url("https://example.com").geolocation_latitude(40.0).geolocation_longitude(-3.7e-5)

    query = options.to_query()
    assert query.get("geolocation_latitude") == "40"
    assert query.get("geolocation_longitude") == "-0.000037"


def test_format_number():
    assert format_number(3) == "3"
    assert format_number(2.0) == "2"
    assert format_number(0.25) == "0.25"

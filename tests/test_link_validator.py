import pytest
from poem_printer.config import SITE_URL
from poem_printer.errors import ValidationError
from poem_printer.link_validator import (
    parse_link_to_path,
    require_poem_path,
    build_poem_url,
)

def test_parse_link_basic():
    assert parse_link_to_path("https://ganjoor.net/hafez/ghazal/sh1") == "/hafez/ghazal/sh1"

def test_parse_link_without_scheme():
    assert parse_link_to_path("ganjoor.net/attar/divana/ghazal-attar/sh3") == "/attar/divana/ghazal-attar/sh3"

def test_parse_link_stops_at_query_and_fragment():
    assert parse_link_to_path("https://ganjoor.net/hafez/ghazal/sh2?x=1") == "/hafez/ghazal/sh2"
    assert parse_link_to_path("https://ganjoor.net/hafez/ghazal/sh2#bn3") == "/hafez/ghazal/sh2"

def test_parse_link_case_insensitive_and_trimmed():
    assert parse_link_to_path("  https://GANJOOR.NET/saadi/golestan/gbab1/sh1  ") == "/saadi/golestan/gbab1/sh1"

@pytest.mark.parametrize("link", [
    "",
    None,
    "https://example.com/hafez/ghazal/sh1",
    "https://ganjoor.net/",
    "ganjoor net/hafez",
    "just some text",
])
def test_parse_link_invalid(link):
    assert parse_link_to_path(link) is None

@pytest.mark.parametrize("link", [
    "https://ganjoor.net/hafez/ghazal/sh1",
    "http://www.ganjoor.net/moulavi/shams/ghazalsh/sh12",
    "ganjoor.net/x",
])
def test_valid_paths_start_with_slash(link):
    assert parse_link_to_path(link).startswith("/")

def test_require_poem_path_raises():
    with pytest.raises(ValidationError):
        require_poem_path("https://example.com/poem")
    # ValidationError is also a ValueError
    with pytest.raises(ValueError):
        require_poem_path("")

def test_build_poem_url_from_path():
    assert build_poem_url("/hafez/ghazal/sh1") == f"{SITE_URL}/hafez/ghazal/sh1"
    assert build_poem_url(" /hafez/ghazal/sh1/ ") == f"{SITE_URL}/hafez/ghazal/sh1"

def test_build_poem_url_invalid():
    with pytest.raises(ValueError):
        build_poem_url(" / / ")

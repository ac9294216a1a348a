import pytest

from fastapi_hal.core.errors import MissingRequiredProperty
from fastapi_hal.utils import (
    build_url,
    encode_query,
    flatten_query,
    merge_href_query,
    parse_bool,
    substitute_path,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (False, False),
        ("true", True),
        ("TRUE", True),
        (" yes ", True),
        ("1", True),
        ("false", False),
        ("0", False),
        ("", False),
        (1, True),
        (0, False),
        (None, False),
    ],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_substitute_path_fills_placeholders():
    assert substitute_path("/fizzes/:fizz_id/buzzes/:buzz_id", {"fizz_id": 42, "buzz_id": "84"}) == (
        "/fizzes/42/buzzes/84"
    )


def test_substitute_path_rejects_missing_values():
    with pytest.raises(MissingRequiredProperty):
        substitute_path("/fizzes/:fizz_id", {})
    with pytest.raises(MissingRequiredProperty):
        substitute_path("/fizzes/:fizz_id", {"fizz_id": None})
    with pytest.raises(MissingRequiredProperty):
        substitute_path("/fizzes/:fizz_id", {"fizz_id": ""})


def test_merge_href_query_keeps_explicit_values():
    query = {"page": 5}
    merge_href_query("/buzzes?page=2&fizz=buzz", query)
    assert query == {"page": 5, "fizz": "buzz"}
    assert list(query) == ["page", "fizz"]


def test_merge_href_query_without_query_string():
    query = {"page": 5}
    assert merge_href_query("/buzzes", query) == {"page": 5}
    assert merge_href_query(None, query) == {"page": 5}


def test_flatten_query_nests_mappings():
    assert flatten_query({"page": 2, "filter": {"label": "a", "active": True}}) == [
        ("page", "2"),
        ("filter[label]", "a"),
        ("filter[active]", "true"),
    ]


def test_encode_query_url_encodes_brackets():
    assert encode_query({"filter": {"label": "man chuck"}}) == "filter%5Blabel%5D=man+chuck"


def test_build_url_replaces_query_string():
    assert build_url("https://api.example.com/fizzes/:fizz_id?x=1", {"fizz_id": 7}, "page=2") == (
        "https://api.example.com/fizzes/7?page=2"
    )
    assert build_url("https://api.example.com/fizzes", {}, "") == "https://api.example.com/fizzes"

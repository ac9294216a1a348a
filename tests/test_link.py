import pytest

from fastapi_hal import HalLink
from fastapi_hal.core.errors import MissingHrefOrRel


def test_link_from_href_string():
    link = HalLink("self", "http://nterprise.com")

    assert link.rel == "self"
    assert link.href == "http://nterprise.com"
    assert link.name is None
    assert link.is_templated is False
    assert link.is_relative is False
    assert link.to_object() == {
        "rel": "self",
        "href": "http://nterprise.com",
        "name": None,
        "hreflang": None,
        "title": None,
        "templated": False,
        "icon": None,
        "query": {},
        "method": None,
        "relative": False,
    }


def test_link_from_mapping_copies_known_properties():
    link = HalLink(
        "self",
        {
            "href": "http://nterprise.com",
            "rel": "not self",
            "name": "manchuck",
            "hrefLang": "EN-us",
            "title": "Master of the universe",
            "templated": True,
            "icon": "https://bit.ly/2XKc1N2",
            "query": {"foo": "bar"},
            "method": "GET",
            "relative": True,
            "fizz": "buzz",
        },
    )

    assert link.rel == "self"
    assert link.is_relative is False
    assert not hasattr(link, "fizz")
    assert link.to_object() == {
        "rel": "self",
        "href": "http://nterprise.com",
        "name": "manchuck",
        "hreflang": "EN-us",
        "title": "Master of the universe",
        "templated": True,
        "icon": "https://bit.ly/2XKc1N2",
        "query": {"foo": "bar"},
        "method": "GET",
        "relative": False,
    }


def test_relative_can_be_overridden():
    link = HalLink("self", "http://nterprise.com")
    link.relative = "true"
    assert link.is_relative is True
    assert link.to_object()["relative"] is True


def test_relative_is_derived_from_href():
    assert HalLink("self", "/fizzes").is_relative is True
    assert HalLink("self", {"href": "https://example.com"}).is_relative is False


@pytest.mark.parametrize("value, expected", [("true", True), ("1", True), ("false", False), (0, False)])
def test_templated_is_coerced(value, expected):
    link = HalLink("self", {"href": "/fizzes/{id}", "templated": value})
    assert link.is_templated is expected


def test_snake_case_href_lang_alias():
    assert HalLink("self", {"href": "/a", "href_lang": "nl"}).href_lang == "nl"


def test_link_requires_rel():
    with pytest.raises(MissingHrefOrRel):
        HalLink("", "/fizzes")


def test_link_mapping_requires_href():
    with pytest.raises(MissingHrefOrRel):
        HalLink("self", {"title": "no href"})


def test_query_must_be_a_mapping():
    link = HalLink("self", "/fizzes")
    with pytest.raises(TypeError):
        link.query = ["page", 1]

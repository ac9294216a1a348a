from __future__ import annotations

from typing import Any

import pytest

from fastapi_hal import HalRenderer


HAL_OPTIONS: dict[str, Any] = {
    "api_base": "https://api.example.com",
    "build_link_header": False,
    "entity_definitions": [
        {
            "entity_type": "fizz",
            "collection_type": "fizzes",
            "version": "v1",
            "entity_path": "/fizzes/:fizz_id",
            "collection_path": "/fizzes",
            "collection_query": ["page", "per_page", "sort"],
            "collection_map": {
                "page": "page",
                "total_count": "total_count",
                "per_page": "per_page",
            },
            "entity_map": {"FID": "fizz_id", "fizzName": "name"},
        },
        {
            "entity_type": "buzz",
            "collection_type": "buzzes",
            "version": "v1",
            "entity_path": "/buzzes/:buzz_id",
            "collection_path": "/buzzes",
            "collection_query": ["page", "per_page", "sort", "filter[label]", "filter[active]"],
            "collection_map": {
                "page": "page",
                "total_count": "total_count",
                "per_page": "per_page",
            },
            "entity_map": {
                "BID": "buzz_id",
                "FID": "fizz_id",
                "buzzLabel": "label",
                "isActive": "active",
            },
        },
        {
            "entity_type": "foo",
            "collection_type": "foos",
            "version": "v1",
            "entity_path": "/foos/:foo_id",
            "collection_path": "/foos",
            "collection_query": ["page", "per_page", "sort", "filter[title]"],
            "collection_map": {
                "page": "page",
                "total_count": "total_count",
                "per_page": "per_page",
            },
            "entity_map": {"foo_id": "foo_id", "FID": "fizz_id", "title": "title"},
        },
    ],
}


@pytest.fixture
def hal_options() -> dict[str, Any]:
    return HAL_OPTIONS


@pytest.fixture
def render(hal_options: dict[str, Any]) -> HalRenderer:
    return HalRenderer(hal_options)

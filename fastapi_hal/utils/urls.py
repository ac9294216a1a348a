"""Helpers for HAL link paths and query strings."""

from __future__ import annotations

import re
from typing import Any, Mapping, MutableMapping
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from fastapi_hal.core.errors import MissingRequiredProperty

PATH_PARAMETER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def stringify(value: Any) -> str:
    """Render a scalar the way it appears in a URL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def path_parameters(path: str) -> list[str]:
    """Return the ``:name`` placeholders of a path in order."""
    return PATH_PARAMETER.findall(path)


def substitute_path(path: str, values: Mapping[str, Any]) -> str:
    """Fill every ``:name`` placeholder of ``path`` from ``values``."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = values.get(name)
        if value is None or stringify(value) == "":
            raise MissingRequiredProperty(
                f"Resource is missing required property: {name}"
            )
        return quote(stringify(value), safe="")

    return PATH_PARAMETER.sub(replace, path)


def merge_href_query(href: str | None, query: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Copy query string pairs from ``href`` into ``query`` without overriding."""
    if not href or "?" not in href:
        return query
    query_string = href.split("?", 1)[1]
    for key, value in parse_qsl(query_string, keep_blank_values=True):
        if key not in query:
            query[key] = value
    return query


def flatten_query(query: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten nested query values into ``key[sub]=value`` pairs."""
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if isinstance(value, Mapping):
            pairs.extend((f"{key}[{sub}]", stringify(item)) for sub, item in value.items())
        elif isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[{index}]", stringify(item)) for index, item in enumerate(value))
        else:
            pairs.append((key, stringify(value)))
    return pairs


def encode_query(query: Mapping[str, Any]) -> str:
    """URL-encode a (possibly nested) query mapping."""
    return urlencode(flatten_query(query))


def build_url(absolute_url: str, values: Mapping[str, Any], query_string: str) -> str:
    """Substitute path placeholders and replace the query string of a URL."""
    split = urlsplit(absolute_url)
    path = substitute_path(split.path or "/", values)
    return urlunsplit((split.scheme, split.netloc, path, query_string, split.fragment))

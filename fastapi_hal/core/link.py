"""HAL link relation."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi_hal.core.errors import MissingHrefOrRel
from fastapi_hal.utils.booleans import parse_bool

# Mapping keys accepted as link properties, and the attribute each one sets.
LINK_PROPERTIES = {
    "name": "name",
    "hrefLang": "href_lang",
    "href_lang": "href_lang",
    "title": "title",
    "templated": "templated",
    "icon": "icon",
    "query": "query",
    "method": "method",
}


def _is_absolute(href: str | None) -> bool:
    return bool(href) and href.startswith("http")


class HalLink:
    """A single HAL link relation and its optional metadata.

    ``value`` is either the href itself or a mapping holding ``href`` plus any
    of ``name``, ``hrefLang``, ``title``, ``templated``, ``icon``, ``query``
    and ``method``. Other keys are ignored; the relation always comes from
    ``rel`` and ``relative`` can only be changed through the property.
    """

    def __init__(self, rel: str, value: str | Mapping[str, Any]) -> None:
        if not rel:
            raise MissingHrefOrRel('"rel" is required for HalLink')

        self._rel = rel
        self.href: str | None = None
        self.name: str | None = None
        self.href_lang: str | None = None
        self.title: str | None = None
        self.icon: str | None = None
        self.method: str | None = None
        self._templated = False
        self._query: dict[str, Any] = {}

        if not isinstance(value, Mapping):
            self.href = value
            self._relative = not _is_absolute(value)
            return

        if "href" not in value:
            raise MissingHrefOrRel("Missing href for HalLink")

        self.href = value["href"]
        self._relative = not _is_absolute(self.href)

        for key, attribute in LINK_PROPERTIES.items():
            if key in value:
                setattr(self, attribute, value[key])

    @property
    def rel(self) -> str:
        return self._rel

    @property
    def query(self) -> dict[str, Any]:
        return self._query

    @query.setter
    def query(self, query: Mapping[str, Any]) -> None:
        if not isinstance(query, Mapping):
            raise TypeError("HalLink query must be a mapping")
        self._query = dict(query)

    @property
    def templated(self) -> bool:
        return self._templated

    @templated.setter
    def templated(self, value: Any) -> None:
        self._templated = parse_bool(value)

    @property
    def relative(self) -> bool:
        return self._relative

    @relative.setter
    def relative(self, value: Any) -> None:
        self._relative = parse_bool(value)

    @property
    def is_templated(self) -> bool:
        return self._templated

    @property
    def is_relative(self) -> bool:
        return self._relative

    def to_object(self) -> dict[str, Any]:
        """Return every link field, including ``query`` and ``relative``."""
        return {
            "rel": self.rel,
            "href": self.href,
            "name": self.name,
            "hreflang": self.href_lang,
            "title": self.title,
            "templated": self.templated,
            "icon": self.icon,
            "query": self.query,
            "method": self.method,
            "relative": self.relative,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HalLink):
            return NotImplemented
        return self.to_object() == other.to_object()

    def __repr__(self) -> str:
        return f"HalLink(rel={self.rel!r}, href={self.href!r})"

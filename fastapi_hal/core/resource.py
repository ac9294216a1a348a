"""HAL resource aggregate."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi_hal.core.errors import (
    CollectionNotEmbeddable,
    EmbedLimitExceeded,
    LinkAlreadySet,
    LinkNotFound,
    NotALink,
    NotEmbeddable,
)
from fastapi_hal.core.link import HalLink
from fastapi_hal.utils.booleans import parse_bool

HAL_MAX_EMBED_LIMIT = 100

RESERVED_KEYS = ("_links", "_embed")


class HalResource:
    """A typed data payload with links and embedded resources."""

    def __init__(
        self,
        type_: str,
        data: Mapping[str, Any] | None = None,
        collection: Any = False,
    ) -> None:
        self._type = type_
        self._data = {
            key: value for key, value in (data or {}).items() if key not in RESERVED_KEYS
        }
        self._collection = parse_bool(collection)
        self._embeds: dict[str, list[HalResource]] = {}
        self._links: dict[str, HalLink] = {}

    @property
    def type(self) -> str:
        return self._type

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @property
    def embeds(self) -> dict[str, list[HalResource]]:
        return self._embeds

    @property
    def links(self) -> dict[str, HalLink]:
        return self._links

    @property
    def is_collection(self) -> bool:
        return self._collection

    def add_embed(self, resource: HalResource) -> None:
        """Embed a resource under its type, keeping insertion order."""
        if not isinstance(resource, HalResource):
            raise NotEmbeddable("Only resources can be embedded")
        if resource.is_collection:
            raise CollectionNotEmbeddable("Collections cannot be embedded")

        bucket = self._embeds.setdefault(resource.type, [])
        if len(bucket) >= HAL_MAX_EMBED_LIMIT:
            raise EmbedLimitExceeded(
                f"Embedded resources cannot exceed {HAL_MAX_EMBED_LIMIT}"
            )
        bucket.append(resource)

    def add_link(self, link: HalLink, overwrite: bool = False) -> None:
        """Set the link for its relation; existing relations need ``overwrite``."""
        if not isinstance(link, HalLink):
            raise NotALink("Only HAL Links can be added")
        if not overwrite and self.has_link_rel(link.rel):
            raise LinkAlreadySet(f"Cannot add [{link.rel}] link: already set")
        self._links[link.rel] = link

    def has_link_rel(self, rel: str) -> bool:
        return rel in self._links

    def get_link_rel(self, rel: str) -> HalLink:
        if not self.has_link_rel(rel):
            raise LinkNotFound(f"Resource does not contain the [{rel}] link")
        return self._links[rel]

    def has_links(self) -> bool:
        return bool(self._links)

    def has_embedded(self) -> bool:
        return bool(self._embeds)

    def has_embedded_type(self, type_: str) -> bool:
        return type_ in self._embeds

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HalResource):
            return NotImplemented
        return (
            self.type == other.type
            and self.data == other.data
            and self.is_collection == other.is_collection
            and self.embeds == other.embeds
            and self.links == other.links
        )

    def __repr__(self) -> str:
        kind = "collection" if self.is_collection else "entity"
        return f"HalResource(type={self.type!r}, {kind}, links={list(self.links)!r})"

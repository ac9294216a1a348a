"""Convert entities into HAL resources."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Protocol, runtime_checkable

from fastapi_hal.core.errors import InvalidHalConfigForEntity, LinkAlreadySet, NotAnEntity
from fastapi_hal.core.link import HalLink
from fastapi_hal.core.resource import HalResource
from fastapi_hal.pagination.cursor import PageInfo
from fastapi_hal.schemas.config import EntityHalConfig, TransformConfig, load_config

logger = logging.getLogger(__name__)


@runtime_checkable
class Entity(Protocol):
    """Capability interface for anything that can become a resource.

    Entities may also expose ``assigned_to``: an iterable of
    ``"<TYPE>:<id>"`` references to other entities.
    """

    def type_name(self) -> str:
        ...

    def to_object(self) -> dict[str, Any]:
        ...


def entity_type_name(value: Any) -> str:
    """Return the configuration key for an entity, entity class or type name."""
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, Entity):
        return value.type_name()
    raise NotAnEntity("Only entities can be converted to resources")


class EntitySerializer:
    """Serialize entities and entity cursors into ``HalResource`` trees."""

    def __init__(self, config: TransformConfig | Mapping[str, Any]) -> None:
        self.config = load_config(TransformConfig, config)

    def get_hal_for_entity(self, entity: Any) -> EntityHalConfig:
        """Return the HAL configuration for an entity or entity class."""
        entity_config = self.config.entity_config.get(entity_type_name(entity))
        if entity_config is None or entity_config.hal is None:
            raise InvalidHalConfigForEntity()
        return entity_config.hal

    def entity_to_resource(self, entity: Entity) -> HalResource:
        """Convert a single entity into a resource with its configured links."""
        if not isinstance(entity, Entity):
            raise NotAnEntity("Only entities can be converted to resources")

        hal = self.get_hal_for_entity(entity)
        resource = HalResource(hal.rel, entity.to_object())

        for rel, value in hal.links:
            resource.add_link(HalLink(rel, value))

        for reference in getattr(entity, "assigned_to", None) or []:
            self._add_assigned_link(resource, reference)

        return resource

    def entities_to_collection(
        self, prototype: Any, cursor: Iterator[Entity], self_href: str
    ) -> HalResource:
        """Drain ``cursor`` into a collection resource.

        The cursor is a generator whose return value is the pagination
        metadata (a ``PageInfo`` or an equivalent mapping). A ``next`` link
        pointing at ``self_href`` is added while there are more results.
        """
        hal = self.get_hal_for_entity(prototype)
        collection = HalResource(
            hal.rel,
            {"total_count": 0, "offset": None, "limit": 1},
            collection=True,
        )

        while True:
            try:
                entity = next(cursor)
            except StopIteration as stop:
                page = PageInfo.coerce(stop.value)
                break
            collection.add_embed(self.entity_to_resource(entity))

        logger.debug(
            "Cursor for %s exhausted: total=%s offset=%s",
            hal.rel,
            page.total_count,
            page.offset,
        )
        collection.data["total_count"] = page.total_count
        collection.data["limit"] = page.page_count
        if page.offset:
            collection.data["offset"] = page.offset
            collection.add_link(
                HalLink(
                    "next",
                    {
                        "href": self_href,
                        "query": {"limit": page.page_count, "offset": page.offset},
                    },
                )
            )
        return collection

    def resolve_assigned_to(self, reference: str) -> tuple[str, str]:
        """Return ``(rel, href)`` for an ``"<TYPE>:<id>"`` reference."""
        type_code, _, entity_id = reference.partition(":")

        entity_name = next(
            (
                name
                for name, entity_config in self.config.entity_config.items()
                if entity_config.type == type_code
            ),
            None,
        )
        hal = self.config.entity_config[entity_name].hal if entity_name else None
        path = next(
            (path for path, target in self.config.path_map.items() if target.entity == entity_name),
            None,
        )
        if hal is None or path is None:
            raise InvalidHalConfigForEntity(
                f"Invalid HAL configured for assigned entity: {reference}"
            )
        return hal.rel, f"{path}/{entity_id}"

    def _add_assigned_link(self, resource: HalResource, reference: str) -> None:
        rel, href = self.resolve_assigned_to(reference)
        try:
            resource.add_link(HalLink(rel, href))
        except LinkAlreadySet:
            # Only one link per relation; the first reference wins.
            logger.debug("Dropping assigned-to link %s for [%s]", reference, rel)

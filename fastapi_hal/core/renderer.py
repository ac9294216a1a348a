"""HAL document rendering."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi_hal.core.errors import UnsupportedEntityType
from fastapi_hal.core.link import HalLink
from fastapi_hal.core.resource import HalResource
from fastapi_hal.schemas.config import EntityDefinition, HalOptions, load_config
from fastapi_hal.utils.urls import build_url, encode_query, merge_href_query

logger = logging.getLogger(__name__)

HAL_MEDIA_TYPE = "application/hal+json"

# Link fields that never appear in the wire form as-is.
HIDDEN_LINK_FIELDS = ("rel", "templated", "query", "relative")

# Link fields forwarded as Link header parameters.
LINK_HEADER_PARAMS = ("title", "hreflang")


def quoted_string(value: Any) -> str:
    """Quote a header parameter value, escaping backslashes and double quotes."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class HalRenderer:
    """Render ``HalResource`` trees into HAL documents.

    The renderer is configured once; entity definitions are looked up by
    resource type and cached for the lifetime of the instance. Rendering
    mutates the resource passed in: a ``self`` link is added when missing and
    link query strings are merged into ``HalLink.query``.
    """

    def __init__(self, options: HalOptions | Mapping[str, Any]) -> None:
        """Validate the options and prepare an empty definition cache."""
        self.options = load_config(HalOptions, options)
        self._definitions: dict[str, EntityDefinition] = {}

    @property
    def api_base(self) -> str:
        return self.options.api_base

    def __call__(self, resource: HalResource) -> dict[str, Any]:
        return self.render(resource)

    def media_type(self, resource: HalResource) -> str:
        """Return the content type for a rendered resource."""
        return HAL_MEDIA_TYPE

    def get_definition_for_entity(self, entity_type: str) -> EntityDefinition:
        """Return the definition configured for ``entity_type``."""
        definition = self._definitions.get(entity_type)
        if definition is not None:
            return definition

        for candidate in self.options.entity_definitions:
            if candidate.entity_type == entity_type:
                logger.debug("Caching entity definition for %s", entity_type)
                self._definitions[entity_type] = candidate
                return candidate

        raise UnsupportedEntityType(f"Invalid resource type: {entity_type}")

    def allowed_collection_query(
        self, entity_type: str, params: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Keep only the query parameters the collection definition allows."""
        allowed = set(self.get_definition_for_entity(entity_type).collection_query)
        return {key: value for key, value in params.items() if key in allowed}

    def add_self_link(self, resource: HalResource) -> None:
        """Add the definition's path as the ``self`` link unless one is set."""
        definition = self.get_definition_for_entity(resource.type)
        if resource.has_link_rel("self"):
            return
        path = definition.collection_path if resource.is_collection else definition.entity_path
        resource.add_link(HalLink("self", path))

    def extract_resource_data(self, resource: HalResource) -> dict[str, Any]:
        """Project resource data onto the public field names of its definition."""
        definition = self.get_definition_for_entity(resource.type)
        field_map = definition.collection_map if resource.is_collection else definition.entity_map
        public_fields = set(field_map.values())

        extracted: dict[str, Any] = {field: None for field in field_map.values()}
        for key, value in resource.data.items():
            extracted[field_map.get(key, key)] = value

        return {key: value for key, value in extracted.items() if key in public_fields}

    def build_link_query(self, link: HalLink) -> str:
        """Merge the href query string into ``link.query`` and encode it."""
        merge_href_query(link.href, link.query)
        return encode_query(link.query)

    def build_link_href(self, link: HalLink, resource: HalResource) -> str | None:
        """Return the absolute href for ``link`` in the context of ``resource``."""
        if not link.is_relative:
            return link.href

        absolute_url = f"{self.api_base}{link.href or ''}"
        if link.is_templated:
            return absolute_url

        values = {**resource.data, **self.extract_resource_data(resource)}
        return build_url(absolute_url, values, self.build_link_query(link))

    def render_links(self, resource: HalResource) -> dict[str, dict[str, Any]]:
        """Render every link of ``resource`` keyed by relation."""
        links: dict[str, dict[str, Any]] = {}
        for link in resource.links.values():
            rendered = {
                key: value
                for key, value in link.to_object().items()
                if key not in HIDDEN_LINK_FIELDS and value is not None
            }
            if link.is_templated:
                rendered["templated"] = True
            rendered["href"] = self.build_link_href(link, resource)
            links[link.rel] = rendered
        return links

    def render_resource(self, resource: HalResource) -> dict[str, Any]:
        """Render data and ``_links`` for a single resource."""
        self.add_self_link(resource)
        body = self.extract_resource_data(resource)
        body["_links"] = self.render_links(resource)
        return body

    def render_embed(self, resource: HalResource) -> dict[str, list[dict[str, Any]]]:
        """Render embedded resources grouped by their collection type."""
        embedded: dict[str, list[dict[str, Any]]] = {}
        for bucket in resource.embeds.values():
            for child in bucket:
                rendered = self.render_resource(child)
                key = self.get_definition_for_entity(child.type).collection_type
                embedded.setdefault(key, []).append(rendered)
        return embedded

    def build_link_header(self, links: Mapping[str, Mapping[str, Any]]) -> str:
        """Format rendered links as an RFC 8288 ``Link`` header value.

        Templated links are left out: a URI template is not a URI reference.
        """
        values = []
        for rel, link in links.items():
            if link.get("templated"):
                continue
            parts = [f"<{link['href']}>", f"rel={quoted_string(rel)}"]
            parts.extend(
                f"{param}={quoted_string(link[param])}"
                for param in LINK_HEADER_PARAMS
                if param in link
            )
            values.append("; ".join(parts))
        return ", ".join(values)

    def render(self, resource: HalResource) -> dict[str, Any]:
        """Render ``resource`` into ``{"type": ..., "body": ...}``."""
        if not isinstance(resource, HalResource):
            raise UnsupportedEntityType(
                f"Invalid resource type: {getattr(resource, 'type', None)}"
            )

        body = self.render_resource(resource)
        if resource.is_collection or resource.has_embedded():
            body["_embedded"] = self.render_embed(resource)

        document: dict[str, Any] = {"type": self.media_type(resource), "body": body}
        if self.options.build_link_header:
            document["headers"] = {"Link": self.build_link_header(body["_links"])}
        return document

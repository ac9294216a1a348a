"""Entity serializers for HAL resources."""

from .entity import Entity, EntitySerializer, entity_type_name

__all__ = ["Entity", "EntitySerializer", "entity_type_name"]

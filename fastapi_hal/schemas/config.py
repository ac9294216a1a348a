"""Pydantic schemas for renderer and entity transform configuration."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fastapi_hal.core.errors import InvalidHalConfig

ModelT = TypeVar("ModelT", bound=BaseModel)


class EntityDefinition(BaseModel):
    """How one entity type is addressed and projected."""

    entity_type: str
    collection_type: str
    version: Optional[str] = None
    entity_path: str
    collection_path: str
    collection_query: List[str] = Field(default_factory=list)
    collection_map: Dict[str, str] = Field(default_factory=dict)
    entity_map: Dict[str, str] = Field(default_factory=dict)


class HalOptions(BaseModel):
    """Renderer options shared by every entity type."""

    api_base: str
    build_link_header: bool = False
    entity_definitions: List[EntityDefinition]


class EntityHalConfig(BaseModel):
    """HAL relation and static links for an entity class."""

    rel: str
    links: List[Tuple[str, Union[str, Dict[str, Any]]]] = Field(default_factory=list)


class EntityConfig(BaseModel):
    """Entity class configuration: short type code plus its HAL setup."""

    type: Optional[str] = None
    hal: Optional[EntityHalConfig] = None


class PathTarget(BaseModel):
    """Entity class served under a path."""

    entity: str


class TransformConfig(BaseModel):
    """Entity-to-resource configuration."""

    model_config = ConfigDict(populate_by_name=True)

    entity_config: Dict[str, EntityConfig] = Field(default_factory=dict, alias="entityConfig")
    path_map: Dict[str, PathTarget] = Field(default_factory=dict, alias="pathMap")


def load_config(model: Type[ModelT], value: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    """Validate ``value`` against ``model``, raising ``InvalidHalConfig`` on failure."""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise InvalidHalConfig(
            "Invalid hal configuration",
            details=exc.errors(include_url=False),
        ) from exc

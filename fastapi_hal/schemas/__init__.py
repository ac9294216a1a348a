"""Pydantic schemas for HAL configuration."""

from .config import (
    EntityConfig,
    EntityDefinition,
    EntityHalConfig,
    HalOptions,
    PathTarget,
    TransformConfig,
    load_config,
)

__all__ = [
    "EntityConfig",
    "EntityDefinition",
    "EntityHalConfig",
    "HalOptions",
    "PathTarget",
    "TransformConfig",
    "load_config",
]

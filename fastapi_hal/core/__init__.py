"""Core HAL data model, renderer and problem helpers."""

from .errors import HalError
from .link import HalLink
from .problem import hal_problem
from .renderer import HalRenderer
from .resource import HAL_MAX_EMBED_LIMIT, HalResource

__all__ = ["HAL_MAX_EMBED_LIMIT", "HalError", "HalLink", "HalRenderer", "HalResource", "hal_problem"]

"""HAL error taxonomy."""

from typing import Any


class HalError(Exception):
    """Base class for errors raised while building or rendering HAL."""

    status_code: int = 500


class InvalidHalConfig(HalError):
    """Renderer or transform configuration has the wrong shape."""

    def __init__(self, message: str = "Invalid hal configuration", details: Any = None) -> None:
        super().__init__(message)
        if details is not None:
            self.details = details


class InvalidHalConfigForEntity(InvalidHalConfig):
    """No HAL relation is configured for an entity type."""

    def __init__(self, message: str = "Invalid HAL configured for entity") -> None:
        super().__init__(message)


class UnsupportedEntityType(HalError):
    """A resource type has no entity definition."""

    status_code = 415


class NotAnEntity(HalError):
    """Value does not implement the entity interface."""


class InvalidCursorResult(HalError):
    """Entity cursor finished without pagination metadata."""


class MissingRequiredProperty(HalError):
    """A path placeholder could not be filled from resource data."""


class NotEmbeddable(HalError):
    """Only resources can be embedded."""


class CollectionNotEmbeddable(HalError):
    """Collections cannot be embedded."""


class EmbedLimitExceeded(HalError):
    """Too many embedded resources of one type."""


class NotALink(HalError):
    """Only HAL links can be added to a resource."""


class LinkAlreadySet(HalError):
    """Relation already has a link."""


class LinkNotFound(HalError):
    """Relation has no link."""


class MissingHrefOrRel(HalError):
    """A link was built without a relation or href."""


class RequestValidationFailed(HalError):
    """Request parameters or body did not validate."""

    status_code = 422

    def __init__(self, message: str = "Request validation failed", details: Any = None) -> None:
        super().__init__(message)
        self.details = details if details is not None else []

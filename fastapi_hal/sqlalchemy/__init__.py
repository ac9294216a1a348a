"""SQLAlchemy helpers for HAL entity cursors."""

from .data_layer import ModelEntity, paginate_entities

__all__ = ["ModelEntity", "paginate_entities"]

"""Pagination helpers for entity cursors."""

from .cursor import PageInfo, paginate_sequence

__all__ = ["PageInfo", "paginate_sequence"]

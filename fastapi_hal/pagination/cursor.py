"""Pull-based entity cursors and their pagination metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator, Mapping, Sequence, TypeVar

from fastapi_hal.core.errors import InvalidCursorResult

ItemT = TypeVar("ItemT")


@dataclass(frozen=True)
class PageInfo:
    """Terminal value of an entity cursor.

    ``offset`` is where the next page starts, or ``None`` when there are no
    more results. ``page_count`` is the page size.
    """

    total_count: int
    offset: Any = None
    page_count: int = 1

    @classmethod
    def coerce(cls, value: Any) -> PageInfo:
        """Accept a ``PageInfo`` or a mapping in snake or camel case."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, Mapping):
            raise InvalidCursorResult("Entity cursor must finish with pagination metadata")

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in value:
                    return value[key]
            raise InvalidCursorResult(f"Entity cursor result is missing {keys[0]}")

        return cls(
            total_count=pick("total_count", "totalCount"),
            offset=pick("offset"),
            page_count=pick("page_count", "pageCount"),
        )


def paginate_sequence(
    items: Sequence[ItemT], limit: int, offset: int = 0
) -> Generator[ItemT, None, PageInfo]:
    """Yield one page of ``items`` and return its ``PageInfo``."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    offset = max(offset, 0)
    total = len(items)
    yield from items[offset : offset + limit]
    next_offset = offset + limit
    return PageInfo(
        total_count=total,
        offset=next_offset if next_offset < total else None,
        page_count=limit,
    )

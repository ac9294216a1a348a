"""SQLAlchemy entity adapter and page cursor."""

from __future__ import annotations

from typing import Any, Callable, Generator

from sqlalchemy import Select, func, select
from sqlalchemy.inspection import inspect
from sqlalchemy.orm import Session

from fastapi_hal.pagination.cursor import PageInfo


class ModelEntity:
    """Expose a mapped SQLAlchemy instance through the entity interface."""

    def __init__(self, instance: Any, *, assigned_to_attr: str = "assigned_to") -> None:
        """Wrap a mapped instance."""
        self.instance = instance
        self.assigned_to_attr = assigned_to_attr

    def type_name(self) -> str:
        return type(self.instance).__name__

    def to_object(self) -> dict[str, Any]:
        """Return the mapped column attributes of the instance."""
        mapper = inspect(type(self.instance))
        return {attr.key: getattr(self.instance, attr.key) for attr in mapper.column_attrs}

    @property
    def assigned_to(self) -> list[str]:
        value = getattr(self.instance, self.assigned_to_attr, None)
        if not value:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return list(value)

    def __repr__(self) -> str:
        return f"ModelEntity({self.instance!r})"


def paginate_entities(
    session: Session,
    statement: Select[Any],
    *,
    limit: int = 10,
    offset: int = 0,
    wrap: Callable[[Any], Any] = ModelEntity,
) -> Generator[Any, None, PageInfo]:
    """Yield one page of ``statement`` results as entities.

    The generator returns a ``PageInfo`` whose ``offset`` points at the next
    page, or ``None`` once the last row has been served.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    offset = max(offset, 0)

    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    total = session.execute(count_statement).scalar_one()

    rows = session.execute(statement.limit(limit).offset(offset)).scalars()
    for row in rows:
        yield wrap(row)

    next_offset = offset + limit
    return PageInfo(
        total_count=total,
        offset=next_offset if next_offset < total else None,
        page_count=limit,
    )

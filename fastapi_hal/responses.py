"""Starlette responses for HAL and problem documents."""

from __future__ import annotations

from typing import Any, Mapping

from fastapi.responses import JSONResponse

from fastapi_hal.core.problem import PROBLEM_MEDIA_TYPE, PROBLEM_TYPE_BASE, hal_problem
from fastapi_hal.core.renderer import HAL_MEDIA_TYPE, HalRenderer
from fastapi_hal.core.resource import HalResource


class HALResponse(JSONResponse):
    """JSON response served as ``application/hal+json``."""

    media_type = HAL_MEDIA_TYPE


class ProblemResponse(JSONResponse):
    """JSON response served as ``application/problem+json``."""

    media_type = PROBLEM_MEDIA_TYPE


def hal_response(
    renderer: HalRenderer,
    resource: HalResource,
    *,
    status_code: int = 200,
    headers: Mapping[str, str] | None = None,
) -> HALResponse:
    """Render ``resource`` and wrap the document in a ``HALResponse``."""
    document = renderer.render(resource)
    response_headers: dict[str, str] = dict(document.get("headers", {}))
    if headers:
        response_headers.update(headers)
    return HALResponse(
        document["body"],
        status_code=status_code,
        headers=response_headers or None,
        media_type=document["type"],
    )


def problem_response(error: BaseException, *, type_base: str = PROBLEM_TYPE_BASE) -> ProblemResponse:
    """Map ``error`` to a problem document and wrap it in a ``ProblemResponse``."""
    problem: dict[str, Any] = hal_problem(error, type_base=type_base)
    return ProblemResponse(
        problem["body"],
        status_code=problem["statusCode"],
        headers=getattr(error, "headers", None),
        media_type=problem["type"],
    )

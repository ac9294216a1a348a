"""Problem document error handling for ASGI apps."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from fastapi_hal.core.errors import HalError, RequestValidationFailed
from fastapi_hal.core.problem import PROBLEM_TYPE_BASE
from fastapi_hal.responses import problem_response

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert uncaught exceptions into problem documents."""

    def __init__(self, app: Any, type_base: str = PROBLEM_TYPE_BASE) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.type_base = type_base

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app, answering with a problem document on failure."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                raise
            logger.exception("Unhandled error for %s %s", scope.get("method"), scope.get("path"))
            response = problem_response(exc, type_base=self.type_base)
            await response(scope, receive, send)


def install_problem_handlers(app: FastAPI, type_base: str = PROBLEM_TYPE_BASE) -> None:
    """Answer HTTP, request validation and HAL errors with problem documents."""

    async def handle(request: Request, exc: Exception) -> Response:
        return problem_response(exc, type_base=type_base)

    async def handle_validation(request: Request, exc: RequestValidationError) -> Response:
        error = RequestValidationFailed(details=jsonable_encoder(exc.errors()))
        return problem_response(error, type_base=type_base)

    app.add_exception_handler(StarletteHTTPException, handle)
    app.add_exception_handler(RequestValidationError, handle_validation)
    app.add_exception_handler(HalError, handle)

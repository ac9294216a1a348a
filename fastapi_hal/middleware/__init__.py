"""Middleware and exception handlers for HAL APIs."""

from .error_handler import ErrorHandlerMiddleware, install_problem_handlers

__all__ = ["ErrorHandlerMiddleware", "install_problem_handlers"]

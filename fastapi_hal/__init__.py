"""HAL resource rendering for FastAPI services."""

from .core.errors import HalError
from .core.link import HalLink
from .core.problem import hal_problem
from .core.renderer import HalRenderer
from .core.resource import HAL_MAX_EMBED_LIMIT, HalResource
from .middleware import ErrorHandlerMiddleware, install_problem_handlers
from .pagination import PageInfo, paginate_sequence
from .responses import HALResponse, ProblemResponse, hal_response, problem_response
from .serializers import Entity, EntitySerializer

__all__ = [
    "HAL_MAX_EMBED_LIMIT",
    "Entity",
    "EntitySerializer",
    "ErrorHandlerMiddleware",
    "HALResponse",
    "HalError",
    "HalLink",
    "HalRenderer",
    "HalResource",
    "PageInfo",
    "ProblemResponse",
    "hal_problem",
    "hal_response",
    "install_problem_handlers",
    "paginate_sequence",
    "problem_response",
]

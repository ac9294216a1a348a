"""RFC 7807 problem documents for errors."""

from __future__ import annotations

import re
from typing import Any

PROBLEM_MEDIA_TYPE = "application/problem+json"
PROBLEM_TYPE_BASE = "http://docs.nterprise.com/docs/api/errors/"

DEFAULT_STATUS = 500
DEFAULT_TITLE = "Internal Server Error"

# Every capital after the first starts a word: "BadRequest" -> "Bad Request",
# "HTTPException" -> "H T T P Exception".
_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _status_code(error: BaseException) -> int:
    status = getattr(error, "status_code", None)
    if isinstance(status, int) and not isinstance(status, bool) and status > 0:
        return status
    return DEFAULT_STATUS


def problem_title(error: BaseException, status: int) -> str:
    """Derive a human title from the error class name."""
    if status == DEFAULT_STATUS:
        return DEFAULT_TITLE
    name = type(error).__name__
    if name.endswith("Error") and name != "Error":
        name = name[: -len("Error")]
    return _WORD_BOUNDARY.sub(" ", name).strip()


def problem_type_name(title: str) -> str:
    """Join the words of a title in PascalCase: "H T T P Exception" -> "HTTPException"."""
    return "".join(word[:1].upper() + word[1:].lower() for word in title.split())


def problem_detail(error: BaseException) -> str:
    """Return the client-facing message of an error."""
    detail = getattr(error, "detail", None)
    if isinstance(detail, str):
        return detail
    return str(error)


def hal_problem(error: BaseException, type_base: str = PROBLEM_TYPE_BASE) -> dict[str, Any]:
    """Build a problem document from an error.

    The status comes from ``error.status_code`` (500 when absent). A
    ``details`` attribute on the error is passed through as
    ``validation_messages``.
    """
    status = _status_code(error)
    title = problem_title(error, status)

    body: dict[str, Any] = {
        "type": f"{type_base}{problem_type_name(title)}",
        "detail": problem_detail(error),
        "status": status,
        "title": title,
    }
    if hasattr(error, "details"):
        body["validation_messages"] = error.details

    return {
        "statusCode": status,
        "type": PROBLEM_MEDIA_TYPE,
        "body": body,
    }

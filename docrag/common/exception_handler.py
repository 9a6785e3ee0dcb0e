"""Turning exceptions into structured payloads, log lines and HTTP statuses.

RAGError subclasses serialize themselves; anything else is described from
its traceback so API clients and logs see one shape for every failure.
"""

import json
import logging
import traceback
from typing import Any

from ..core.domain.exceptions import (
    ConfigurationError,
    DocumentNotFoundError,
    EmbeddingRateLimitError,
    IngestionError,
    LLMRateLimitError,
    RAGError,
    ScrapingError,
    ValidationError,
    VectorStoreError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses precede their bases
HTTP_STATUS_BY_EXCEPTION: tuple[tuple[type[Exception] | tuple[type[Exception], ...], int], ...] = (
    (ValidationError, 400),
    (DocumentNotFoundError, 404),
    ((LLMRateLimitError, EmbeddingRateLimitError), 429),
    (ScrapingError, 502),
    (IngestionError, 400),
    (VectorStoreError, 503),
    (ConfigurationError, 500),
    (RAGError, 500),
    (ValueError, 400),
    ((ConnectionError, TimeoutError), 503),
)

BUILTIN_ERROR_CODE = "PYTHON_ERR"


def _describe_builtin(exc: Exception, include_trace: bool) -> dict[str, Any]:
    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    origin = frames[-1] if frames else None

    payload: dict[str, Any] = {
        "error": {"type": type(exc).__name__, "code": BUILTIN_ERROR_CODE, "message": str(exc)},
        "location": {
            "class": "<unknown>",
            "method": origin.name if origin else "<unknown>",
            "file": origin.filename.replace("\\", "/").rsplit("/", 1)[-1] if origin else "<unknown>",
            "line": origin.lineno if origin else 0,
        },
    }
    if include_trace:
        lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
        payload["stack_trace"] = [line.strip() for line in lines if line.strip()]
    return payload


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Describe an exception as a JSON-ready dictionary.

    Args:
        exc: Exception to describe.
        include_trace: Add the stack trace (debug mode only).
        extra_context: Merged into the payload's ``context`` entry.

    Returns:
        Dictionary with ``error`` (type, code, message), ``location`` and,
        when present, ``context``, ``cause`` and ``stack_trace``.
    """
    if isinstance(exc, RAGError):
        payload = exc.to_dict(include_trace=include_trace)
    else:
        payload = _describe_builtin(exc, include_trace)

    if extra_context:
        payload.setdefault("context", {}).update(extra_context)
    return payload


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log an exception as an indented JSON document, trace included."""
    payload = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(payload, indent=2, default=str))


def get_http_status_code(exc: Exception) -> int:
    """HTTP status for an exception, 500 when nothing more specific applies."""
    for exc_types, status in HTTP_STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_types):
            return status
    return 500

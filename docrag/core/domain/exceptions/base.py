"""Root of the docrag exception hierarchy.

Every RAGError carries a stable error code, the place it was raised, the
exception that caused it (if any) and free-form context. ``to_dict`` is
the shape used in log lines and API error bodies.
"""

import sys
import traceback
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from pathlib import PurePath
from typing import Any


@dataclass(frozen=True)
class ErrorLocation:
    """Where an error was raised."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def unknown(cls) -> "ErrorLocation":
        return cls("<unknown>", "<unknown>", "<unknown>", 0)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {
            "class": data["class_name"],
            "method": data["method_name"],
            "file": data["file_name"],
            "line": data["line_number"],
            "timestamp": data["timestamp"],
        }


class RAGError(Exception):
    """Base class for errors raised by docrag.

    Subclasses set ``error_code``; callers pass the triggering exception as
    ``cause`` and anything useful for debugging as ``context``::

        raise ScrapingError(f"Failed to fetch {url}", cause=e, context={"url": url}) from e
    """

    error_code: str = "RAG_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = context or {}
        self.location = self._locate_raise_site()
        self.stack_trace = traceback.format_exc() if cause else None

    def _locate_raise_site(self) -> ErrorLocation:
        # Walk outwards past the constructors of this error and its bases
        frame = sys._getframe(1)
        while (
            frame is not None
            and frame.f_code.co_name == "__init__"
            and frame.f_locals.get("self") is self
        ):
            frame = frame.f_back
        if frame is None:
            return ErrorLocation.unknown()

        owner = frame.f_locals.get("self")
        return ErrorLocation(
            class_name=type(owner).__name__ if owner is not None else "<module>",
            method_name=frame.f_code.co_name,
            file_name=PurePath(frame.f_code.co_filename.replace("\\", "/")).name,
            line_number=frame.f_lineno,
        )

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Serialize for logs and API responses.

        Args:
            include_trace: Include the captured stack trace (debug mode).

        Returns:
            ``error``, ``location`` and, when present, ``context``,
            ``stack_trace`` and ``cause``.
        """
        payload: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            payload["context"] = dict(self.extra_context)
        if include_trace and self.stack_trace:
            payload["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]
        if self.cause is not None:
            payload["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        return payload

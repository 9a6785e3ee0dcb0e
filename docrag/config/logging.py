"""Logging setup for docrag.

Everything logs under the ``docrag`` logger. Console output is human
readable by default; ``LOG_JSON=true`` switches to one JSON object per line,
which carries the error code and context of any RAGError attached to the
record.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..core.domain.exceptions import RAGError

ROOT_LOGGER_NAME = "docrag"

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_DATE_FORMAT = "%H:%M:%S"

# HTTP client chatter drowns out the engine's own messages at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "google_genai")


class JSONLineFormatter(logging.Formatter):
    """Render each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "where": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            entry["exc_type"] = type(exc).__name__
            if isinstance(exc, RAGError):
                entry["error_code"] = exc.error_code
                if exc.extra_context:
                    entry["error_context"] = exc.extra_context
            entry["traceback"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Attach handlers to the ``docrag`` logger.

    Calling this again replaces the previous handlers, so the API and the
    CLI can both call it at startup.

    Args:
        level: Level name for docrag's own loggers.
        log_file: Also write to this file.
        json_format: Emit JSON lines instead of the console format.

    Returns:
        The ``docrag`` logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))

    formatter = (
        JSONLineFormatter()
        if json_format
        else logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root

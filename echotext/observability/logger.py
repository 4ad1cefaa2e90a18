# echotext/observability/logger.py

# structured JSON logging
import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

from echotext.config import Settings

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Marks the handler we own so repeated configuration replaces it
_HANDLER_NAME = "echotext-console"


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt=DATE_FORMAT,
            rename_fields={"levelname": "level", "name": "logger"},
        )
    return logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)


def configure_logging(settings: Settings, stream: Optional[TextIO] = None) -> None:
    """Configure root logging for the service.

    - Root level comes from settings.LOG_LEVEL.
    - One console handler (stdout unless another stream is given), JSON or
      plain text depending on settings.LOG_JSON.
    - The access/error loggers used by the HTTP layer propagate to it.
    - Safe to call more than once.
    """
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)

    for h in list(root.handlers):
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)

    console = logging.StreamHandler(stream=stream or sys.stdout)
    console.set_name(_HANDLER_NAME)
    console.setFormatter(_build_formatter(settings.LOG_JSON))
    root.addHandler(console)

    for logger_name in ("access", "error"):
        lg = logging.getLogger(logger_name)
        lg.setLevel(logging.INFO if logger_name == "access" else logging.ERROR)
        lg.propagate = True

    # Keep uvicorn's own loggers on the same format
    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        lg = logging.getLogger(logger_name)
        lg.handlers.clear()
        lg.propagate = True

    logging.getLogger("startup").info("logging configured", extra={"log_json": settings.LOG_JSON})

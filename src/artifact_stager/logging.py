"""Structured logging configuration."""
import datetime
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import EventDict, Processor

from artifact_stager.errors import StageError

CALLER_KEYS = ("module", "line", "file")


def add_timestamp(_, __, event_dict: EventDict) -> EventDict:
    """Add ISO timestamp to the event dict."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.datetime.now(datetime.timezone.utc).isoformat()
    return event_dict


class CompactJSONRenderer:
    """Single-line JSON renderer with minimal output."""

    def __call__(self, _: Any, __: str, event_dict: EventDict) -> str:
        items = {
            "ts": event_dict.pop("timestamp", None),
            "lvl": event_dict.pop("level", "???"),
            "msg": event_dict.pop("event", ""),
            **{k: v for k, v in event_dict.items() if k in CALLER_KEYS},
        }
        if other := {k: v for k, v in event_dict.items() if k not in CALLER_KEYS}:
            items["data"] = other
        return json.dumps(items, separators=(",", ":"), default=str)


def build_processors(json_output: bool) -> List[Processor]:
    """Processor chain for machine (JSON) or interactive (console) output."""
    if json_output:
        return [
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            add_timestamp,
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FILENAME,
                }
            ),
            rename_callsite,
            structlog.processors.format_exc_info,
            CompactJSONRenderer(),
        ]

    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=True),
    ]


def rename_callsite(_, __, event_dict: EventDict) -> EventDict:
    """Map structlog's callsite keys onto the compact renderer's names."""
    for src, dst in (("func_name", "module"), ("lineno", "line"), ("filename", "file")):
        if src in event_dict:
            event_dict[dst] = event_dict.pop(src)
    return event_dict


def configure_logging(level: str = "INFO", json_output: Optional[bool] = None) -> None:
    """Configure structured logging for the application.

    Logs always go to STDERR so STDOUT stays free for command output:
    - not a terminal: compact single-line JSON
    - a terminal: structlog's colored console renderer
    """
    if json_output is None:
        json_output = not sys.stderr.isatty()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
        force=True,
    )

    structlog.configure(
        processors=build_processors(json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[structlog.stdlib.BoundLogger] = None,
) -> None:
    """Log an error with context."""
    logger = logger or get_logger(__name__)

    error_info: Dict[str, Any] = {
        "error_type": error.__class__.__name__,
        "error_message": str(error),
    }
    if context:
        error_info["context"] = context
    if isinstance(error, StageError):
        error_info["details"] = error.details
    if error.__cause__ is not None:
        error_info["cause"] = repr(error.__cause__)

    logger.error("stage_error", **error_info)

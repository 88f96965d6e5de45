"""
Structured logging for schema generation runs.

Provides:
- JSON format for log aggregation
- Run correlation IDs shared by every line of one conversion
- Timing of collection analysis and whole runs
"""

import logging
import json
import sys
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import IO, Iterator, Optional
from datetime import datetime, timezone

# Context variable for the current conversion run
run_id_ctx: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StructuredFormatter(logging.Formatter):
    """
    One JSON object per line: time, level, logger, message, the current
    run id, the traceback if any, and the fields the caller passed in
    ``extra={"extra_fields": {...}}`` (collection, duration_ms, ...).
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_data = {
            "time": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run_id = run_id_ctx.get()
        if run_id:
            log_data["run_id"] = run_id

        log_data.update(getattr(record, "extra_fields", {}))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class PerformanceTracker:
    """
    Context manager for timing one step of a conversion run.

    Usage:
        with PerformanceTracker("analyze_collection", logger, collection="users"):
            analyzer.analyze("users")
    """

    def __init__(
        self,
        operation: str,
        logger: logging.Logger,
        log_level: int = logging.INFO,
        **extra_fields,
    ):
        """
        Initialize performance tracker.

        Args:
            operation: Operation name
            logger: Logger instance
            log_level: Log level for completion message
            **extra_fields: Additional structured fields
        """
        self.operation = operation
        self.logger = logger
        self.log_level = log_level
        self.extra_fields = extra_fields
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def _fields(self, **fields) -> dict:
        extra = {"operation": self.operation, **self.extra_fields, **fields}
        run_id = run_id_ctx.get()
        if run_id:
            extra["run_id"] = run_id
        return extra

    def __enter__(self):
        """Start timing."""
        self.start_time = time.perf_counter()
        self.logger.debug(
            f"Starting operation: {self.operation}",
            extra={"extra_fields": self._fields()},
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log completion with duration. Exceptions are never suppressed."""
        self.duration_ms = round((time.perf_counter() - self.start_time) * 1000, 2)

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation}",
                extra={"extra_fields": self._fields(
                    duration_ms=self.duration_ms,
                    error=str(exc_val),
                    error_type=exc_type.__name__,
                )},
            )
        else:
            self.logger.log(
                self.log_level,
                f"Operation completed: {self.operation}",
                extra={"extra_fields": self._fields(duration_ms=self.duration_ms)},
            )
        return False


def setup_logging(log_level: str = "INFO", json_format: bool = True, stream: Optional[IO[str]] = None):
    """
    Send all log output to one stderr handler.

    Stdout stays free for the generated schema. Handlers installed earlier
    are replaced, so calling this twice does not duplicate lines.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: JSON lines if True, plain text otherwise
        stream: Destination stream, stderr by default
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter() if json_format else logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(level)

    # The driver logs every server heartbeat at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)


def set_run_id(run_id: Optional[str] = None) -> str:
    """
    Set the conversion run ID in context.

    Args:
        run_id: Run ID (generated if not provided)

    Returns:
        Run ID
    """
    if run_id is None:
        run_id = str(uuid.uuid4())
    run_id_ctx.set(run_id)
    return run_id


@contextmanager
def run_scope(run_id: Optional[str] = None) -> Iterator[str]:
    """
    Tag log lines with a run ID for the duration of the block.

    The caller's run ID, if any, is restored on exit.
    """
    token = run_id_ctx.set(run_id or str(uuid.uuid4()))
    try:
        yield run_id_ctx.get()
    finally:
        run_id_ctx.reset(token)


def get_run_id() -> Optional[str]:
    """Get current run ID from context."""
    return run_id_ctx.get()


def clear_run_id():
    """Clear run ID from context."""
    run_id_ctx.set(None)

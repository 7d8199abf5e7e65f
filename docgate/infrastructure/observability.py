"""Activity Logging - append-only activity log plus console echo.

Invariants:
    - Every activity line reads "[<ISO-8601 UTC timestamp>] <message>"
    - Callers only enqueue records; file and console IO run on the listener thread
    - A failing log file never fails the caller (FileHandler.handleError reports
      to stderr and swallows)
    - setup_logging() owns exactly one QueueHandler on the root logger

Design Decisions:
    - QueueHandler/QueueListener: logging is a one-way send, decoupled from request latency
    - FileHandler(delay=True): the file is opened on first write, so an unwritable
      path surfaces through handleError instead of failing startup
"""

import json
import logging
import queue
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener


def _iso_timestamp(created: float) -> str:
    stamp = datetime.fromtimestamp(created, timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ActivityFormatter(logging.Formatter):
    """Format records as "[timestamp] message" activity lines."""

    def format(self, record: logging.LogRecord) -> str:
        line = f"[{_iso_timestamp(record.created)}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured console output."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": _iso_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("collection", "document_id", "error_code", "path"):
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


_queue_handler: QueueHandler | None = None


def setup_logging(
    level: str = "INFO", fmt: str = "text", log_file: str | None = "project.log",
) -> QueueListener:
    """Configure logging for the application and start the listener thread.

    The caller stops the returned listener on shutdown to flush pending lines.
    """
    global _queue_handler

    console = logging.StreamHandler()
    if fmt == "json":
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(ActivityFormatter())
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8", delay=True)
        file_handler.setFormatter(ActivityFormatter())
        handlers.append(file_handler)

    records: queue.SimpleQueue = queue.SimpleQueue()
    if _queue_handler is not None:
        logging.root.removeHandler(_queue_handler)
    _queue_handler = QueueHandler(records)
    logging.root.addHandler(_queue_handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

    listener = QueueListener(records, *handlers, respect_handler_level=True)
    listener.start()
    return listener


def teardown_logging(listener: QueueListener) -> None:
    """Flush pending records and detach the queue handler."""
    global _queue_handler
    listener.stop()
    for handler in listener.handlers:
        handler.close()
    if _queue_handler is not None:
        logging.root.removeHandler(_queue_handler)
        _queue_handler = None

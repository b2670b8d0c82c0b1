"""
Todo App - Logging Configuration
Structured logging with JSON support
"""

import logging
import sys
import json
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path


ROOT_LOGGER_NAME = "todo"

# Set per HTTP request by RequestLoggingMiddleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logs"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request_id = request_id_var.get()
        if request_id:
            log_data["request_id"] = request_id

        if hasattr(record, "extra_data"):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter"""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record, so color a copy
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    log_file: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR
        json_logs: Use JSON format (production)
        log_file: Path to a JSON log file (optional)
        stream: Console stream, stdout by default

    Returns:
        Configured logger
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(logger.level)

    if json_logs:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_settings(settings, stream=None) -> logging.Logger:
    """Configure logging from a Settings instance."""
    return setup_logging(
        log_level=settings.logging.level,
        json_logs=settings.logging.json_logs,
        log_file=str(settings.logging.file) if settings.logging.file else None,
        stream=stream,
    )


class LoggerAdapter(logging.LoggerAdapter):
    """Adds bound context to every record as extra_data"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = kwargs.get("extra", {})
        data = dict(self.extra)
        data.update(extra.get("extra_data", {}))
        if data:
            extra["extra_data"] = data
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    Get a logger with bound context.

    Args:
        name: Logger name under the app namespace (e.g. "api.movies")
        **context: Extra context attached to every record

    Returns:
        Logger with context
    """
    base_logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return LoggerAdapter(base_logger, context)


# === Logging helpers ===

def log_api_request(
    logger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    **extra
):
    """Log a served API request"""
    logger.info(
        "%s %s -> %d [%.1fms]",
        method,
        path,
        status_code,
        duration_ms,
        extra={"extra_data": {
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": duration_ms,
            **extra
        }}
    )


def log_error(
    logger,
    error: Exception,
    context: str = "",
    **extra
):
    """Log an error with traceback"""
    logger.error(
        "Error in %s: %s: %s",
        context,
        type(error).__name__,
        error,
        exc_info=error,
        extra={"extra_data": extra}
    )

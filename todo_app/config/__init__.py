"""
Todo App - Configuration
"""
from .settings import Settings, LoggingSettings, ApiSettings, get_settings, reset_settings
from .logging import (
    setup_logging,
    setup_logging_from_settings,
    get_logger,
    log_api_request,
    log_error,
    request_id_var,
    JSONFormatter,
    ColoredFormatter,
)

__all__ = [
    "Settings",
    "LoggingSettings",
    "ApiSettings",
    "get_settings",
    "reset_settings",
    # Logging
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
    "log_api_request",
    "log_error",
    "request_id_var",
    "JSONFormatter",
    "ColoredFormatter",
]

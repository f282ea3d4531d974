"""
Logging configuration for structured logging.

Every record is emitted as a single JSON object on stdout, tagged with the
correlation id of the request being served.
"""

import os
import sys

from pythonjsonlogger import jsonlogger

APP_LOGGERS = ("core", "api", "brands", "products", "licenses", "activations")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that adds service and request context."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("service", "license-hub")
        log_record["level"] = record.levelname

        from core.middleware.observability import get_correlation_id

        correlation_id = get_correlation_id()
        if correlation_id and "correlation_id" not in log_record:
            log_record["correlation_id"] = correlation_id


def get_logging_config(environment: str = "development") -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)

    Returns:
        Django logging configuration dictionary
    """
    log_level = os.environ.get(
        "LOG_LEVEL", "DEBUG" if environment == "development" else "INFO"
    )

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": sys.stdout,
        },
    }
    log_file = os.environ.get("LOG_FILE")
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
    handler_names = list(handlers)

    loggers = {
        "django": {
            "handlers": handler_names,
            "level": "INFO",
            "propagate": False,
        },
        "django.request": {
            "handlers": handler_names,
            "level": "WARNING",
            "propagate": False,
        },
        "django.db.backends": {
            "handlers": handler_names,
            "level": "WARNING",
            "propagate": False,
        },
    }
    for name in APP_LOGGERS:
        loggers[name] = {
            "handlers": handler_names,
            "level": log_level,
            "propagate": False,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
            },
            "verbose": {
                "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": handler_names,
            "level": log_level,
        },
        "loggers": loggers,
    }

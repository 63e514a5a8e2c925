# 📄 File: user_service/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the logging system that records what happens in the User Service in a
# structured way, so every line written while serving a request can be traced back to it.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting (python-json-logger), request-id
# context propagation through contextvars, and one-time root logger configuration.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: user_service.main (startup), request logging middleware (request ids)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from user_service.shared.config.settings import get_settings

SERVICE_NAME = "user-service"

# Context variable for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

_logging_configured = False


def _hostname() -> str:
    return os.uname().nodename if hasattr(os, 'uname') else 'unknown'


class ContextualFormatter(logging.Formatter):
    """
    Text formatter that adds the request id, hostname and service name
    to every record.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()
        self.service_name = SERVICE_NAME

    def format(self, record):
        record.request_id = request_id_var.get()
        record.hostname = self.hostname
        record.service = self.service_name
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class ServiceJSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per line with a consistent set of keys for
    log aggregation tools.
    """

    def __init__(self):
        super().__init__(
            "%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d",
            rename_fields={"levelname": "level", "name": "logger", "funcName": "function", "lineno": "line"},
        )
        self.hostname = _hostname()

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname
        request_id = request_id_var.get()
        if request_id:
            log_record['request_id'] = request_id


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Level name; defaults to settings.LOG_LEVEL
        log_format: 'json' or 'text'; defaults to settings.LOG_FORMAT
        force: Reconfigure even if logging was already set up

    Returns:
        The startup logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = ServiceJSONFormatter()
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('passlib').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(request_id: Optional[str] = None) -> Iterator[str]:
    """
    Context manager tagging every log record emitted inside it with a request id.

    Args:
        request_id: Request identifier; generated when not provided
    """
    if request_id is None:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)

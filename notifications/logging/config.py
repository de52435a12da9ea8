"""Structlog configuration: JSON file logs plus coloured console logs."""

import logging
import logging.handlers
import os
from pathlib import Path

import structlog

from notifications.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

DEFAULT_LOG_FILE_PATH = "./logs/food-ordering-notifications.log"
MAX_LOG_FILE_BYTES = 100 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 240


def _pre_chain(include_metadata: bool) -> list:
    """Processors applied to records from libraries that use stdlib logging."""
    chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]
    if include_metadata:
        chain += [add_service_context, add_process_info]
    return chain


def setup_logging(log_file_path: str | None = None, log_level: str | None = None) -> None:
    """Configure structlog with JSON file output and coloured console output.

    The file handler rotates at 100MB and keeps 240 backups. Both handlers
    receive request_id; the file output also carries service name,
    environment and process/thread ids.

    Environment Variables:
    - LOG_FILE_PATH: Path to log file (default: ./logs/food-ordering-notifications.log)
    - LOG_LEVEL: Logging level (default: INFO)
    - SERVICE_NAME: Service name for metadata
    - ENVIRONMENT: Deployment environment (default: development)

    Args:
        log_file_path: Overrides LOG_FILE_PATH.
        log_level: Overrides LOG_LEVEL.
    """
    log_file_path = log_file_path or os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE_PATH)
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, log_level, logging.INFO)

    Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=MAX_LOG_FILE_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_pre_chain(include_metadata=True),
        )
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_pre_chain(include_metadata=False),
        )
    )

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_request_context,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_file=log_file_path,
        log_level=log_level,
    )

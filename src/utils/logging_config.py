import logging
import sys
from pathlib import Path
from typing import Any, Dict

import structlog

from src.config.config import config

SENSITIVE_KEYS = ("api_key", "appid", "token", "authorization")


class CustomFormatter(logging.Formatter):
    """Formatter producing: [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}"""

    def format(self, record):
        class_name = record.name.split('.')[-1] if '.' in record.name else record.name
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{class_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def redact_sensitive(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Replace credential values in log events, including inside a params dict."""
    for key in list(event_dict.keys()):
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            event_dict[key] = "REDACTED"

    params = event_dict.get("params")
    if isinstance(params, dict):
        event_dict["params"] = {
            k: ("REDACTED" if any(s in k.lower() for s in SENSITIVE_KEYS) else v)
            for k, v in params.items()
        }

    return event_dict


def ensure_logs_directory() -> Path:
    """Ensure the logs directory exists."""
    logs_dir = Path("logs")
    logs_dir.mkdir(exist_ok=True)
    return logs_dir


def get_log_file_path() -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory()
    return logs_dir / f"city_weather_{config.environment}.log"


def setup_logging():
    """
    Configure logging for the application.

    Standard library logging writes to stdout and to a per-environment file
    with the format [yyyy-mm-dd hh:mm:ss] [log_type] [class_name]: {message}.
    structlog loggers are routed through it and rendered as JSON or as
    key=value console text depending on config.log_format.
    """
    level = getattr(logging, config.log_level.upper())
    log_file_path = get_log_file_path()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # httpx logs full request URLs, which include the appid query parameter
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            redact_sensitive,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(__name__)
    logger.info("Logging configured", log_file=str(log_file_path), log_format=config.log_format)

"""Centralized logging configuration."""
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union
import json
from datetime import datetime, timezone


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_type: str = "text",
    enabled: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure application logging.

    Console output goes to stderr unless another stream is given, so log lines
    never interleave with the interactive prompts on stdout.
    """

    if not enabled:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)

    handlers = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=numeric_level,
        handlers=handlers,
        force=True  # Override existing configuration
    )


class JsonFormatter(logging.Formatter):
    """Format logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "session_id"):
            log_data["session_id"] = record.session_id

        return json.dumps(log_data)


def get_logger(
    name: str, session_id: Optional[str] = None
) -> Union[logging.Logger, logging.LoggerAdapter]:
    """Get a logger, optionally tagging its records with a session ID."""
    logger = logging.getLogger(name)

    if session_id:
        return logging.LoggerAdapter(logger, {"session_id": session_id})

    return logger

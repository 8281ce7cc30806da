"""
Secure Logging Module
=====================

Logging helpers that keep secrets out of log output.

Security Features:
- Hidden, SafePassword and SafeArray arguments are replaced with the
  redaction marker before the message is formatted
- password/key/token/secret patterns in text are redacted
- Long hex runs (key material) are redacted
- Rotating log files with size limits
- Structured (JSON) output

The library itself logs only at DEBUG and never logs byte contents.
Applications decide where the output goes:

    log = get_secure_logger("myapp.wallet", level="DEBUG", enable_console=True)
    log.info("unlocking with %s", password)   # ... unlocking with Hidden<redacted>
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Final, Optional, Pattern

from safebytes.core.config import SafeBytesConfig
from safebytes.core.memory.hidden import HIDDEN_MARKER, Hidden
from safebytes.core.memory.safe_array import SafeArray


_SENSITIVE_PATTERNS: Final[list[tuple[str, Pattern[str]]]] = [
    ("password", re.compile(r'(?i)(password|passwd|pwd|passphrase)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("api_key", re.compile(r'(?i)(api[_-]?key|apikey)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("token", re.compile(r'(?i)(token|bearer)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("secret", re.compile(r'(?i)(secret|private[_-]?key|spend[_-]?key|view[_-]?key|seed)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    # Hex runs of 64+ characters look like raw keys
    ("hex_secret", re.compile(r'(?i)\b(?:0x)?[a-f0-9]{64,}\b')),
]

_REDACTED_TEXT: Final[str] = "[REDACTED]"

_SECRET_TYPES: Final[tuple[type, ...]] = (Hidden, SafeArray)


def _redact_arg(arg: Any) -> Any:
    if isinstance(arg, _SECRET_TYPES):
        return HIDDEN_MARKER
    return arg


class SecureLogFilter(logging.Filter):
    """
    Log filter that removes secrets from log records.

    Secret wrappers among the arguments become HIDDEN_MARKER; string
    message text and string arguments are scanned for sensitive
    patterns, which are replaced with [REDACTED].
    """

    def __init__(self, name: str = "", additional_patterns: Optional[list[Pattern[str]]] = None) -> None:
        """
        Args:
            name: Logger name filter (empty string matches all)
            additional_patterns: Additional regex patterns to redact
        """
        super().__init__(name)
        self._additional_patterns = additional_patterns or []

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the record in place. Records are never dropped."""
        if isinstance(record.msg, _SECRET_TYPES):
            record.msg = HIDDEN_MARKER
        elif record.msg and isinstance(record.msg, str):
            record.msg = self._sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._clean(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._clean(arg) for arg in record.args)

        return True

    def _clean(self, arg: Any) -> Any:
        arg = _redact_arg(arg)
        if isinstance(arg, str) and arg is not HIDDEN_MARKER:
            return self._sanitize(arg)
        return arg

    def _sanitize(self, text: str) -> str:
        """Remove sensitive data from text."""
        result = text

        for name, pattern in _SENSITIVE_PATTERNS:
            result = pattern.sub(f"{name}={_REDACTED_TEXT}", result)

        for pattern in self._additional_patterns:
            result = pattern.sub(_REDACTED_TEXT, result)

        return result


class StructuredLogFormatter(logging.Formatter):
    """Formatter that writes one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class SecureRotatingFileHandler(RotatingFileHandler):
    """
    Rotating file handler that resolves its path and creates the
    parent directory.
    """

    def __init__(
        self,
        filename: str | Path,
        mode: str = "a",
        maxBytes: int = 10 * 1024 * 1024,
        backupCount: int = 5,
        encoding: str = "utf-8",
    ) -> None:
        if ".." in Path(filename).parts:
            raise ValueError("Log path cannot contain path traversal sequences")

        log_path = Path(filename).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        super().__init__(
            str(log_path),
            mode=mode,
            maxBytes=maxBytes,
            backupCount=backupCount,
            encoding=encoding,
        )


def get_secure_logger(
    name: str,
    level: Optional[str] = None,
    enable_console: Optional[bool] = None,
    log_file: Optional[str | Path] = None,
    enable_json: Optional[bool] = None,
    max_file_size: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Create a logger with secret filtering on every handler.

    Arguments left as None fall back to LoggingConfig.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to output to stderr
        log_file: Optional path of a rotating log file
        enable_json: Whether to use JSON format
        max_file_size: Maximum log file size before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance
    """
    config = SafeBytesConfig.get_instance().logging
    level = (level or config.level).upper()
    enable_console = config.enable_console if enable_console is None else enable_console
    enable_json = config.enable_json if enable_json is None else enable_json

    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level))

    secure_filter = SecureLogFilter()
    logger.addFilter(secure_filter)

    if enable_json:
        formatter: logging.Formatter = StructuredLogFormatter()
    else:
        formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(secure_filter)
        logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = SecureRotatingFileHandler(
            filename=log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(secure_filter)
        logger.addHandler(file_handler)

    if logger.handlers:
        logger.propagate = False

    return logger


__all__ = [
    "SecureLogFilter",
    "StructuredLogFormatter",
    "SecureRotatingFileHandler",
    "get_secure_logger",
]

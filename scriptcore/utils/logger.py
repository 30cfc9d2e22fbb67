"""
Structured logging for scriptcore.

Provides a consistent logging interface with support for:
- Multiple log levels
- Structured JSON logging
- Console and file output
- Rich formatting for console
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "scriptcore"


class LogLevel(str, Enum):
    """Log levels for scriptcore."""
    
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
    
    @property
    def numeric(self) -> int:
        """Get numeric log level."""
        levels = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR,
            "critical": logging.CRITICAL,
        }
        return levels.get(self.value, logging.INFO)


# Global logger cache
_loggers: dict[str, logging.Logger] = {}


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def get_logger(
    name: str = ROOT_LOGGER,
    level: LogLevel | str | None = None,
) -> logging.Logger:
    """
    Get a logger instance.
    
    Loggers below the ``scriptcore`` hierarchy propagate to the root
    scriptcore logger, which owns the console handler.
    
    Args:
        name: Logger name (usually module name)
        level: Log level; inherited from the parent when omitted
    
    Returns:
        Configured logger instance
    """
    if name in _loggers:
        return _loggers[name]
    
    logger = logging.getLogger(name)
    
    if level is not None:
        if isinstance(level, str):
            level = LogLevel(level.lower())
        logger.setLevel(level.numeric)
    
    # Add handler if none exists
    if name == ROOT_LOGGER or not name.startswith(f"{ROOT_LOGGER}."):
        if not logger.handlers:
            logger.addHandler(_rich_handler())
    
    _loggers[name] = logger
    return logger


def setup_logging(
    level: LogLevel | str = LogLevel.INFO,
    log_file: str | Path | None = None,
    json_format: bool = False,
    console: bool = True,
) -> None:
    """
    Set up logging configuration for scriptcore.
    
    Args:
        level: Minimum log level
        log_file: Optional file path for log output
        json_format: Use JSON format for file logs
        console: Enable console output
    """
    if isinstance(level, str):
        level = LogLevel(level.lower())
    
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level.numeric)
    
    # Clear existing handlers
    root.handlers.clear()
    
    if console:
        console_handler = _rich_handler()
        console_handler.setLevel(level.numeric)
        root.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        if json_format:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            ))
        
        file_handler.setLevel(level.numeric)
        root.addHandler(file_handler)


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        if hasattr(record, "extra"):
            log_data.update(record.extra)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data)


def log_execution(
    logger: logging.Logger,
    source: str,
    success: bool,
    duration: float,
    error: str | None = None,
) -> None:
    """
    Log the outcome of a script execution.
    
    Args:
        logger: Logger to use
        source: Script file name, or "<script>" for raw text
        success: Whether the engine reported success
        duration: Duration in seconds
        error: Error message if failed
    """
    if success:
        logger.info(f"[magenta]{source}[/] completed in {duration:.2f}s")
    else:
        logger.error(f"[magenta]{source}[/] failed: {error or 'Unknown error'}")

"""
Logging Utilities
=================

This module provides centralized logging configuration for the toolkit.

Features:
---------
- Consistent log formatting across all modules
- File and console logging
- Verbosity of the MNE readers kept in step with the toolkit
- Timing decorator and progress logging for long aggregations

Example Usage:
    ```python
    from inner_speech.utils.logging import get_logger, setup_logging

    # Setup logging (call once at startup)
    setup_logging(level='INFO', log_file='logs/extraction.log')

    logger = get_logger(__name__)
    logger.info("Extraction started")
    ```
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
from functools import wraps
import time

import mne

from inner_speech.core.config import get_config


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

# Color codes for console output
COLORS = {
    'DEBUG': '\033[36m',      # Cyan
    'INFO': '\033[32m',       # Green
    'WARNING': '\033[33m',    # Yellow
    'ERROR': '\033[31m',      # Red
    'CRITICAL': '\033[35m',   # Magenta
    'RESET': '\033[0m'
}


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


# =============================================================================
# CUSTOM FORMATTER WITH COLORS
# =============================================================================

class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name when writing to a terminal."""

    def __init__(self, fmt: str = DEFAULT_FORMAT, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        original_levelname = record.levelname

        if self.use_colors:
            color = COLORS.get(record.levelname, '')
            record.levelname = f"{color}{record.levelname}{COLORS['RESET']}"

        result = super().format(record)
        record.levelname = original_levelname

        return result


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(
    level: Union[str, int] = 'INFO',
    log_file: Optional[str] = None,
    console: bool = True,
    use_colors: bool = True,
    detailed: bool = False,
    reader_level: Optional[Union[str, int]] = None
) -> None:
    """
    Setup logging configuration for the toolkit.

    Should be called once at application startup.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Optional file path for logging
        console: Whether to log to console
        use_colors: Whether to use colored console output
        detailed: If True, use detailed format with file/line info
        reader_level: Level for the MNE readers. Defaults to the
            ``readers.verbose`` configuration value.
    """
    format_string = DETAILED_FORMAT if detailed else DEFAULT_FORMAT
    level = _to_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(format_string, use_colors))
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(file_handler)

    if reader_level is None:
        reader_level = get_config().get('readers.verbose', 'WARNING')
    mne.set_log_level(reader_level)

    logging.info(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"mne={reader_level}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module (typically ``__name__``)."""
    return logging.getLogger(name)


def set_level(level: Union[str, int], logger_name: Optional[str] = None) -> None:
    """
    Set log level for a specific logger or the root logger.

    Args:
        level: Log level
        logger_name: If None, sets root logger level
    """
    logging.getLogger(logger_name).setLevel(_to_level(level))


# =============================================================================
# PERFORMANCE LOGGING
# =============================================================================

def log_execution_time(logger: Optional[logging.Logger] = None,
                       level: int = logging.DEBUG):
    """
    Decorator to log function execution time.

    Example:
        >>> @log_execution_time()
        ... def extract_everything(root):
        ...     ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)

            start_time = time.time()
            result = func(*args, **kwargs)
            elapsed = time.time() - start_time

            log.log(level, f"{func.__name__} executed in {elapsed:.3f}s")
            return result

        return wrapper
    return decorator


class LogLevel:
    """
    Context manager for temporarily changing log level.

    Example:
        >>> with LogLevel('DEBUG', 'inner_speech.data'):
        ...     extract_data_from_subject(root, 1, 'eeg')
    """

    def __init__(self, level: Union[str, int], logger_name: Optional[str] = None):
        self.level = _to_level(level)
        self.logger_name = logger_name
        self.original_level = None

    def __enter__(self):
        logger = logging.getLogger(self.logger_name)
        self.original_level = logger.level
        logger.setLevel(self.level)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        logging.getLogger(self.logger_name).setLevel(self.original_level)
        return False


class ProgressLogger:
    """
    Progress logger for loops over subjects or blocks.

    Example:
        >>> progress = ProgressLogger(total=len(subjects), desc="Subjects")
        >>> for n_s in subjects:
        ...     ...
        ...     progress.update()
        >>> progress.finish()
    """

    def __init__(self,
                 total: int,
                 desc: str = "Progress",
                 logger: Optional[logging.Logger] = None,
                 log_every: int = 1):
        self.total = total
        self.desc = desc
        self.logger = logger or logging.getLogger(__name__)
        self.log_every = max(1, log_every)
        self.current = 0
        self.start_time = time.time()

    def update(self, n: int = 1) -> None:
        """Advance the counter and log every ``log_every`` steps."""
        self.current += n

        if self.current % self.log_every == 0 or self.current >= self.total:
            elapsed = time.time() - self.start_time
            pct = 100.0 * self.current / self.total if self.total else 100.0
            self.logger.info(
                f"{self.desc}: {self.current}/{self.total} ({pct:.0f}%) "
                f"- {elapsed:.1f}s"
            )

    def finish(self) -> None:
        """Log completion message."""
        elapsed = time.time() - self.start_time
        self.logger.info(f"{self.desc}: completed {self.current} in {elapsed:.1f}s")

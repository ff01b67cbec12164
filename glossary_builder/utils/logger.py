"""
Centralized logging configuration.

The package logger gets a console handler on stderr (so stdout stays free for
page previews) and, when enabled, a rotating log file.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
FILE_FORMAT = '[%(asctime)s] %(name)s %(levelname)s [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Wraps the level name in an ANSI color for terminal output."""

    COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        plain = record.levelname
        record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = plain


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _console_handler(level: str, use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level(level))
    formatter_class = ColoredFormatter if use_colors and sys.stderr.isatty() else logging.Formatter
    handler.setFormatter(formatter_class(CONSOLE_FORMAT))
    return handler


def _file_handler(path: Path, level: str, max_bytes: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(_level(level))
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    name: str = "glossary_builder",
    log_dir: Path = Path("logs"),
    log_level: str = "DEBUG",
    console_level: str = "INFO",
    use_colors: bool = True,
    file_logging: bool = False,
    max_bytes: int = 10_000_000,
    backup_count: int = 5
) -> logging.Logger:
    """
    Attach handlers to the named logger.

    Calling it again for a logger that already has handlers is a no-op.

    Args:
        name: Logger name; also the log file stem
        log_dir: Directory for the log file
        log_level: File handler level
        console_level: Console handler level
        use_colors: Color level names when stderr is a terminal
        file_logging: Add a rotating file handler
        max_bytes: Size at which the log file rotates
        backup_count: Rotated files to keep

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    if file_logging:
        log_path = Path(log_dir) / f"{name}.log"
        logger.addHandler(_file_handler(log_path, log_level, max_bytes, backup_count))
    logger.addHandler(_console_handler(console_level, use_colors))

    return logger

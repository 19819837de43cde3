"""
symdoc logging - one `symdoc` logger writing symdoc.log, with an optional console echo.

The log file lives in SYMDOC_LOG_DIR (default: the current directory). A previous
symdoc.log is kept as symdoc_<timestamp>.log; only the newest KEEP_ROTATED_LOGS
of those survive. SYMDOC_LOG_LEVEL sets the file level (DEBUG by default).
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "symdoc"
LOG_FILENAME = "symdoc.log"
LOG_DIR_ENV = "SYMDOC_LOG_DIR"
LOG_LEVEL_ENV = "SYMDOC_LOG_LEVEL"
KEEP_ROTATED_LOGS = 5

FILE_FORMAT = '[%(asctime)s] [%(levelname)-8s] [%(module)s:%(funcName)s:%(lineno)d] %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'

_logger = None
_console_handler = None


def _log_dir() -> Path:
    log_dir = os.environ.get(LOG_DIR_ENV)
    return Path(log_dir) if log_dir else Path.cwd()


def file_level() -> int:
    """Level for the log file, from SYMDOC_LOG_LEVEL; unknown names fall back to DEBUG."""
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper())
    return level if isinstance(level, int) else logging.DEBUG


def _rotate(log_dir: Path):
    log_path = log_dir / LOG_FILENAME
    if log_path.exists():
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        try:
            log_path.rename(log_dir / f"symdoc_{timestamp}.log")
        except OSError:
            # Overwritten by the new handler instead
            pass

    # Timestamped names sort chronologically
    rotated = sorted(log_dir.glob("symdoc_*.log"))
    for old in rotated[:-KEEP_ROTATED_LOGS]:
        try:
            old.unlink()
        except OSError:
            pass


def get_logger() -> logging.Logger:
    """The symdoc logger, created with its file handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = _log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    _rotate(log_dir)

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(logging.DEBUG)
    log.handlers.clear()
    log.propagate = False

    file_handler = logging.FileHandler(log_dir / LOG_FILENAME, mode='w', encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    file_handler.setLevel(file_level())
    log.addHandler(file_handler)

    _logger = log
    log.info(f"symdoc log started ({logging.getLevelName(file_handler.level)}): {log_dir / LOG_FILENAME}")
    return log


def enable_console(level: int = logging.INFO):
    """Echo records at `level` and above to stderr (used by `symdoc -v`)."""
    global _console_handler
    log = get_logger()
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stderr)
        _console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        log.addHandler(_console_handler)
    _console_handler.setLevel(level)


def disable_console():
    global _console_handler
    if _console_handler is not None:
        get_logger().removeHandler(_console_handler)
        _console_handler = None


# stacklevel=2 so records point at the caller, not at this module
def debug(msg: str, *args, **kwargs):
    get_logger().debug(msg, *args, stacklevel=2, **kwargs)


def info(msg: str, *args, **kwargs):
    get_logger().info(msg, *args, stacklevel=2, **kwargs)


def warning(msg: str, *args, **kwargs):
    get_logger().warning(msg, *args, stacklevel=2, **kwargs)


def error(msg: str, *args, **kwargs):
    get_logger().error(msg, *args, stacklevel=2, **kwargs)


def exception(msg: str, *args, **kwargs):
    """Log at ERROR level with the current traceback."""
    get_logger().exception(msg, *args, stacklevel=2, **kwargs)

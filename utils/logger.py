import logging
import shutil
import sys
from datetime import datetime
from pathlib import Path

from appdirs import user_data_dir

APP_NAME = "bookmark"
LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
# Previous session logs kept next to the current one
MAX_BACKUPS = 2

def _rotate(log_dir: Path, current_log: Path) -> None:
    """Move the previous session log aside, dropping the oldest backups"""
    if not current_log.exists():
        return
    backups = sorted(log_dir.glob("bookmark_*.log"), reverse=True)
    for old in backups[MAX_BACKUPS - 1:]:
        old.unlink()
    stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    shutil.move(str(current_log), str(log_dir / f"bookmark_{stamp}.log"))

def setup_logging(console: bool = False, level: int = logging.INFO) -> Path:
    """Configure logging for the application.

    The interactive session owns the terminal, so the console handler is only
    attached for plain CLI subcommands.
    """
    log_dir = Path(user_data_dir(APP_NAME)) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    current_log = log_dir / "bookmark.log"
    _rotate(log_dir, current_log)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers = [logging.FileHandler(current_log, encoding='utf-8')]
    if console:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.WARNING)
        handlers.append(stderr_handler)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    main_logger = logging.getLogger("Bookmark")
    main_logger.setLevel(level)

    main_logger.info(f"Application started - Log file created at {current_log}")
    return current_log

# Create logger instance with context
class ContextLogger(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        # Add context (record id, mode, module...) if available
        context = kwargs.pop('context', None)
        if context:
            msg = f"[{context}] {msg}"
        return msg, kwargs

# Create the main logger
logger = ContextLogger(logging.getLogger("Bookmark"), {})

def get_logger(name: str) -> ContextLogger:
    """Get a context logger for a component, e.g. 'storage' -> Bookmark.storage"""
    return ContextLogger(logging.getLogger(f"Bookmark.{name}"), {})

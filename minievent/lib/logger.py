import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path

from minievent import PACKAGE


def clean_old_logs(log_dir: Path, max_files: int = 5):
    """Remove old log files, keeping only the most recent `max_files` logs

    Log files in the directory are sorted by modification time and the oldest
    are removed until only `max_files` remain.

    Args:
        log_dir (Path): The directory where the log files are stored.
        max_files (int, optional): The maximum number of log files to keep. Defaults to 5.

    Raises:
        PermissionError: If there is no permission to delete log files.
    """
    log_files = sorted(log_dir.glob("*.log"), key=os.path.getmtime)
    while len(log_files) > max_files:
        old_log = log_files.pop(0)
        old_log.unlink()


class CustomFormatter(logging.Formatter):
    def format(self, record):
        record.levelname = record.levelname.ljust(8)
        return super().format(record)


def configure_logger(
    log_level: int = logging.DEBUG, log_dir: Path | None = None, max_log_files: int = 5
) -> logging.Logger:
    """Configures the package logger with console output and an optional log file

    The console formatter is short and leaves out the date and time, the console
    just wants a quick overview of what was dispatched. When `log_dir` is given
    a log file named after the current date and time is written there as well,
    holding the detailed records with timestamps.

    Only the `minievent` logger is touched, so an application embedding the
    library keeps its own root configuration.

    Args:
        log_level (int): The log level to log at. logging.[DEBUG | INFO | ERROR | CRITICAL | WARN ].
            Defaults to logging.DEBUG.
        log_dir (Path | None): Where to store log files. Defaults to no log file.
        max_log_files (int): Keeps only the previous (n) number of log files. Defaults to 5.

    Returns:
        logging.Logger: The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE)
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    package_logger.addHandler(stream_handler)

    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        clean_old_logs(log_dir=log_dir, max_files=max_log_files)

        log_filename = log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log")
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=10 * 1024**2, backupCount=5
        )
        file_formatter = CustomFormatter(
            "[%(asctime)s] %(levelname)s %(name)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(log_level)
    return package_logger

"""
Logging for TypeScale generation runs.

A run logs to typescale_{config_name}_{timestamp}.log in a 'logs' directory
beside its configuration file and echoes to the console. Only the newest
MAX_LOG_FILES run logs are kept in that directory.

Outside a run every logging call is a no-op, so using TypeScale as a library
stays silent.
"""

import logging
from collections import Counter
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

LOGGER_NAME = "typescale"
LOG_PREFIX = "typescale_"
MAX_LOG_FILES = 5

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


class TypeScaleLogger:
    """Run logger shared by the generator modules."""

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None
    _counts: Counter = Counter()

    @staticmethod
    def _new_log_path(config_path: Path, logs_dir: Optional[Path]) -> Path:
        """Fresh log file path for a run on config_path"""
        logs_dir = logs_dir or config_path.parent / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)

        # Microseconds cut to two digits keep runs within one second apart
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:18]
        return logs_dir / f"{LOG_PREFIX}{config_path.stem}_{stamp}.log"

    @staticmethod
    def _prune_logs(logs_dir: Path, keep: int = MAX_LOG_FILES) -> None:
        """Delete all but the newest `keep` run logs in logs_dir"""
        # Run logs only, other files in logs_dir are left alone
        newest_first = sorted(
            logs_dir.glob(f"{LOG_PREFIX}*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True,
        )
        for stale in newest_first[keep:]:
            try:
                stale.unlink()
            except OSError:
                # Still held open elsewhere; a later run removes it
                pass

    @classmethod
    def setup_logger(
        cls,
        config_path: Union[str, Path],
        log_level: int = logging.INFO,
        console_level: int = logging.INFO,
        logs_dir: Optional[Union[str, Path]] = None,
    ) -> logging.Logger:
        """
        Start logging a run.

        Args:
            config_path: Configuration file the run generates from
            log_level: Level written to the log file (default: INFO)
            console_level: Level echoed to the console (default: INFO)
            logs_dir: Log directory, default 'logs' beside the configuration

        Returns:
            The 'typescale' logger
        """
        # A previous run's handlers would write into its old file
        cls.cleanup()

        config_path = Path(config_path)
        log_path = cls._new_log_path(config_path, Path(logs_dir) if logs_dir else None)

        # One logger for the whole package, file and console handlers per run
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(min(log_level, console_level))

        file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

        # Console shows INFO and up unless --verbose asks for DEBUG
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

        cls._logger = logger
        cls._current_log_file = log_path
        cls._counts = Counter()

        # Startup message
        logger.info(f"Generating from {config_path}")
        logger.debug(f"Log file: {log_path}")

        # After the new file exists, so it counts towards the kept logs
        cls._prune_logs(log_path.parent)
        return logger

    @classmethod
    @contextmanager
    def session(cls, config_path: Union[str, Path], **options) -> Iterator[logging.Logger]:
        """setup_logger() for the duration of a with block"""
        logger = cls.setup_logger(config_path, **options)
        try:
            yield logger
        finally:
            cls.cleanup()

    @classmethod
    def get_logger(cls) -> Optional[logging.Logger]:
        return cls._logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        return cls._current_log_file

    @classmethod
    def count(cls, level: int) -> int:
        """Messages logged at `level` in the current run"""
        return cls._counts[level]

    @classmethod
    def _emit(cls, level: int, message: str) -> None:
        if cls._logger:
            cls._counts[level] += 1
            cls._logger.log(level, message)

    @classmethod
    def info(cls, message: str) -> None:
        cls._emit(logging.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._emit(logging.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._emit(logging.ERROR, message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._emit(logging.DEBUG, message)

    @classmethod
    def success(cls, message: str) -> None:
        """Info-level message marked as a completed step"""
        cls._emit(logging.INFO, f"✅ {message}")

    @classmethod
    def cleanup(cls) -> None:
        """Close the run's handlers and go back to no-op logging."""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
        cls._logger = None
        cls._current_log_file = None

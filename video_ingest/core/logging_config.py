"""
Logging configuration for the Video Ingest Service.

Console and rotating file logging, per-component log levels, and small
helpers for timing pipeline stages and counting errors.
"""

import logging
import logging.handlers
import os
import sys
import time
from typing import Optional
from datetime import datetime

# (logger, level with --log-level DEBUG, level otherwise)
COMPONENT_LEVELS = (
    ('video_ingest.video', logging.DEBUG, logging.INFO),
    ('video_ingest.api', logging.DEBUG, logging.INFO),
    ('uvicorn', logging.INFO, logging.WARNING),
    ('fastapi', logging.WARNING, logging.WARNING),
    # boto logs every request and credential lookup at DEBUG
    ('botocore', logging.INFO, logging.WARNING),
    ('boto3', logging.INFO, logging.WARNING),
    ('s3transfer', logging.INFO, logging.WARNING),
)


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        # Color a copy so file handlers sharing the record keep a plain levelname
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)


class VideoIngestLogger:
    """Root logger setup: colored console plus an optional rotating file"""

    CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    MAX_LOG_BYTES = 10 * 1024 * 1024
    LOG_BACKUPS = 5

    def __init__(self, log_level: str = "INFO", log_file: Optional[str] = None):
        self.log_level = log_level.upper()
        self.log_file = log_file

        self._setup_logging()

    def _setup_logging(self) -> None:
        level = getattr(logging, self.log_level)
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(self.CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

        if self.log_file:
            file_handler = self._create_file_handler()
            if file_handler is not None:
                root_logger.addHandler(file_handler)

        self._setup_component_loggers()

        logging.getLogger(__name__).info(f"Logging initialized - Level: {self.log_level}, File: {self.log_file}")

    def _create_file_handler(self) -> Optional[logging.Handler]:
        """Rotating file handler that records everything down to DEBUG"""
        try:
            log_dir = os.path.dirname(self.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                self.log_file, maxBytes=self.MAX_LOG_BYTES, backupCount=self.LOG_BACKUPS
            )
        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}")
            return None

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(self.FILE_FORMAT))
        return handler

    def _setup_component_loggers(self) -> None:
        debug = self.log_level == 'DEBUG'
        for name, debug_level, normal_level in COMPONENT_LEVELS:
            logging.getLogger(name).setLevel(debug_level if debug else normal_level)

    @staticmethod
    def setup_exception_logging():
        """Setup logging for uncaught exceptions"""

        def handle_exception(exc_type, exc_value, exc_traceback):
            if issubclass(exc_type, KeyboardInterrupt):
                sys.__excepthook__(exc_type, exc_value, exc_traceback)
                return

            logger = logging.getLogger("uncaught_exception")
            logger.critical(
                "Uncaught exception",
                exc_info=(exc_type, exc_value, exc_traceback)
            )

        sys.excepthook = handle_exception


class PerformanceLogger:
    """Logger for timing pipeline stages"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(f"performance.{name}")
        self.start_time: Optional[float] = None

    def start_timer(self, operation: str) -> None:
        self.start_time = time.monotonic()
        self.logger.debug(f"Started: {operation}")

    def end_timer(self, operation: str) -> float:
        if self.start_time is None:
            self.logger.warning(f"Timer not started for: {operation}")
            return 0.0

        duration = time.monotonic() - self.start_time
        self.logger.info(f"Completed: {operation} in {duration:.3f}s")
        self.start_time = None
        return duration


class ErrorTracker:
    """Track and log errors with context"""

    def __init__(self, component_name: str):
        self.component_name = component_name
        self.logger = logging.getLogger(f"errors.{component_name}")
        self.error_count = 0
        self.last_error_time: Optional[datetime] = None

    def log_error(self, error: Exception, context: str = "",
                  additional_data: Optional[dict] = None) -> None:
        """Log an error with context and tracking"""
        self.error_count += 1
        self.last_error_time = datetime.now()

        error_msg = f"Error in {self.component_name}"
        if context:
            error_msg += f" ({context})"
        error_msg += f": {error}"

        if additional_data:
            error_msg += f" | Data: {additional_data}"

        self.logger.error(error_msg, exc_info=error)

    def get_error_stats(self) -> dict:
        return {
            "component": self.component_name,
            "error_count": self.error_count,
            "last_error_time": self.last_error_time.isoformat() if self.last_error_time else None
        }


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> VideoIngestLogger:
    """Setup logging for the entire application"""
    logger_setup = VideoIngestLogger(log_level=log_level, log_file=log_file)

    VideoIngestLogger.setup_exception_logging()

    return logger_setup


def get_performance_logger(component_name: str) -> PerformanceLogger:
    return PerformanceLogger(component_name)


def get_error_tracker(component_name: str) -> ErrorTracker:
    return ErrorTracker(component_name)

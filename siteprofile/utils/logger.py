"""
Pipeline logger for profile extraction runs.

ProfilePipeline logs through a PipelineLogger: one aligned line per event,
structured fields appended as "[key=value ...]", and every warning/error kept
on the instance so a batch caller can report what went wrong after the fact.
"""

import logging
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

DATE_FORMAT = "%Y-%m-%d %H:%M:%S,%f"


class MillisecondsFormatter(logging.Formatter):
    """Formatter whose %(asctime)s carries milliseconds."""

    def formatTime(self, record, datefmt=None):  # noqa: N802 - must match parent class method name
        ct = datetime.fromtimestamp(record.created)
        if datefmt and "%f" in datefmt:
            return ct.strftime(datefmt.replace(",%f", "")) + f",{int(record.msecs):03d}"
        if datefmt:
            return ct.strftime(datefmt)
        return ct.strftime("%Y-%m-%d %H:%M:%S") + f",{int(record.msecs):03d}"


def _line_format(phase: Optional[str]) -> str:
    phase_column = f" | {phase}" if phase else ""
    return f"%(asctime)s | %(levelname)-8s{phase_column} | %(filename)s:%(lineno)d | %(message)s"


def _make_formatter(phase: Optional[str]) -> MillisecondsFormatter:
    return MillisecondsFormatter(_line_format(phase), datefmt=DATE_FORMAT)


def _with_fields(message: str, fields: dict[str, Any]) -> str:
    if not fields:
        return message
    return f"{message} [{' '.join(f'{k}={v}' for k, v in fields.items())}]"


class PipelineLogger:
    """
    Logger used by ProfilePipeline.

    Attributes:
        logger: Underlying stdlib logger (does not propagate to root)
        phase: Optional label printed in every line
        warnings: Warnings logged so far, oldest first
        errors: Errors logged so far, oldest first
    """

    def __init__(
        self,
        name: str = "siteprofile",
        log_level: str = "INFO",
        log_file: Optional[str] = None,
        log_dir: Optional[Path] = None,
        phase: Optional[str] = None,
        stream=None,
    ):
        """
        Args:
            name: Logger name
            log_level: Console level (DEBUG, INFO, WARNING, ERROR)
            log_file: File name for a DEBUG-level log file, if wanted
            log_dir: Directory for log_file (defaults to logs/ at the repo root)
            phase: Label shown in every line (e.g., "extract")
            stream: Console stream (defaults to stdout)
        """
        level = getattr(logging, log_level.upper())
        formatter = _make_formatter(phase)

        self.phase = phase
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False
        self.logger.handlers.clear()

        console = logging.StreamHandler(stream or sys.stdout)
        console.setLevel(level)
        console.setFormatter(formatter)
        self.logger.addHandler(console)

        self.warnings: list[dict[str, Any]] = []
        self.errors: list[dict[str, Any]] = []

        if log_file:
            log_dir = log_dir or Path(__file__).parent.parent.parent / "logs"
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir / log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.info("Logging to file", path=log_dir / log_file)

    def debug(self, message: str, **fields):
        self.logger.debug(_with_fields(message, fields), stacklevel=2)

    def info(self, message: str, **fields):
        self.logger.info(_with_fields(message, fields), stacklevel=2)

    def warning(self, message: str, **fields):
        """Log a warning and keep it in self.warnings."""
        line = _with_fields(message, fields)
        self.logger.warning(line, stacklevel=2)
        self.warnings.append({"message": line, "timestamp": datetime.now().isoformat(), "data": fields})

    def error(self, message: str, exception: Optional[Exception] = None, **fields):
        """Log an error (with traceback when an exception is given) and keep it in self.errors."""
        if exception is not None:
            message = f"{message} | Exception: {exception}"
        line = _with_fields(message, fields)
        self.logger.error(line, exc_info=exception, stacklevel=2)
        self.errors.append(
            {
                "message": line,
                "exception": str(exception) if exception is not None else None,
                "timestamp": datetime.now().isoformat(),
                "data": fields,
            }
        )

    @contextmanager
    def time_operation(self, operation: str, url: str):
        """
        Time one bundle's processing; a failure is logged as an error and re-raised.

        Usage:
            with logger.time_operation("extraction", bundle.final_url):
                ...
        """
        started = datetime.now()
        self.debug(f"Starting {operation}", url=url)
        try:
            yield
        except Exception as e:
            elapsed = (datetime.now() - started).total_seconds()
            self.error(f"Failed {operation}", exception=e, url=url, duration_seconds=round(elapsed, 3))
            raise
        elapsed = (datetime.now() - started).total_seconds()
        self.debug(f"Completed {operation}", url=url, duration_seconds=round(elapsed, 3))


_default_logger: Optional[PipelineLogger] = None


def get_logger(name: str = "siteprofile", log_level: str = "INFO", phase: Optional[str] = None) -> PipelineLogger:
    """Return the process-wide PipelineLogger, creating it on first use."""
    global _default_logger

    if _default_logger is None:
        _default_logger = PipelineLogger(name=name, log_level=log_level, phase=phase)
    return _default_logger


def configure_global_logging(log_level: str = "INFO", phase: Optional[str] = None):
    """
    Give module loggers (logging.getLogger(__name__)) the pipeline line format.

    Replaces any handlers on the root logger with a single stdout handler.
    """
    level = getattr(logging, log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(phase))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

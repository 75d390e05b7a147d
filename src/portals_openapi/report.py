"""Build report log: one ``info:`` / ``warn:`` line per pipeline event."""

import logging
from pathlib import Path

PACKAGE_LOGGER = "portals_openapi"

LEVEL_LABELS = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class ReportFormatter(logging.Formatter):
    """Prefix each message with a short lowercase level label."""

    def format(self, record: logging.LogRecord) -> str:
        label = LEVEL_LABELS.get(record.levelno, record.levelname.lower())
        return f"{label}: {record.getMessage()}"


class ReportHandler(logging.FileHandler):
    """File handler that remembers the package logger level it replaced."""

    def __init__(self, path: Path, previous_level: int):
        super().__init__(path, mode="w", encoding="utf-8")
        self.previous_level = previous_level


def open_report(path: Path, level: int = logging.INFO) -> ReportHandler:
    """Send the package's log records to ``path``, truncating it first."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = ReportHandler(path, previous_level=logger.level)
    handler.setFormatter(ReportFormatter())
    handler.setLevel(level)

    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


def close_report(handler: ReportHandler) -> None:
    """Detach the report and restore the package logger level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.removeHandler(handler)
    logger.setLevel(handler.previous_level)
    handler.close()

"""
Dedicated error log.

Internal failures are appended as "[timestamp] traceback" records to a
plain-text file, next to the structured log output.
"""

import traceback
from pathlib import Path
from typing import Union
import structlog

from utils.time_utils import format_timestamp, utc_now

logger = structlog.get_logger(__name__)


def format_error_entry(exc: BaseException, timestamp: str) -> str:
    """Render one error record, traceback included when available."""
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()
    return f"[{timestamp}] {stack}\n"


class ErrorLogService:
    """Appends internal errors to the error log file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def record(self, exc: BaseException) -> None:
        """
        Append exc to the error log.

        Write failures are reported through structlog only.
        """
        entry = format_error_entry(exc, format_timestamp(utc_now()))
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(entry)
        except OSError as e:
            logger.error(
                "error_log_write_failed",
                path=str(self.path),
                error=str(e),
                original_error=str(exc)
            )

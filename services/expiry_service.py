"""
Expiry sweep for stored mappings.

Runs before every request (see the middleware in main.py) rather than on a
timer. Mappings whose age reaches the retention window are dropped.
"""

from datetime import datetime, timedelta
from typing import Optional
import structlog

from services.mapping_store import MappingStore
from utils.time_utils import ensure_utc, utc_now

logger = structlog.get_logger(__name__)

ONE_DAY = timedelta(days=1)
DEFAULT_RETENTION_DAYS = 1.0


def age_in_days(stored_date: datetime, now: datetime) -> float:
    """
    Fractional days elapsed since stored_date.

    Examples:
        stored 23 hours before now → 0.958...
        stored 25 hours before now → 1.041...
    """
    return (ensure_utc(now) - ensure_utc(stored_date)) / ONE_DAY


class ExpiryService:
    """Removes mappings older than the retention window."""

    def __init__(self, store: MappingStore, retention_days: float = DEFAULT_RETENTION_DAYS):
        self.store = store
        self.retention_days = retention_days

    def sweep(self, now: Optional[datetime] = None) -> int:
        """
        Drop expired mappings.

        Only rewrites the store when at least one mapping was removed.

        Args:
            now: Reference time (defaults to current UTC time)

        Returns:
            Number of mappings removed

        Raises:
            StorageError: If the store cannot be read or written
        """
        now = now or utc_now()

        with self.store.lock:
            document = self.store.load()
            before = len(document.mappings)

            document.mappings = [
                mapping for mapping in document.mappings
                if age_in_days(mapping.stored_date, now) < self.retention_days
            ]

            removed = before - len(document.mappings)
            if removed:
                self.store.save(document)
                logger.info(
                    "expired_mappings_removed",
                    removed=removed,
                    remaining=len(document.mappings)
                )

        return removed

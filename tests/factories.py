"""
Test data factories.

Builds mappings in their on-disk form and writes store documents.
"""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional

from utils.time_utils import format_timestamp


class MappingFactory:
    """
    Factory for creating stored mapping dicts.

    Usage:
        # Create with defaults
        mapping = MappingFactory.create()

        # Stored 25 hours ago
        mapping = MappingFactory.create(age=timedelta(hours=25))

        # Create multiple
        mappings = MappingFactory.create_batch(5)
    """

    _counter = 0

    @classmethod
    def _next_counter(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def create(
        cls,
        key: Optional[str] = None,
        data: Any = None,
        stored_date: Optional[datetime] = None,
        age: Optional[timedelta] = None,
        now: Optional[datetime] = None
    ) -> dict:
        """
        Create a single mapping dict.

        Args:
            key: Mapping key (auto-generated if not provided)
            data: Stored value (defaults to a small object)
            stored_date: Exact timestamp; takes precedence over age
            age: How long before now the mapping was stored
            now: Reference time for age (defaults to current UTC time)

        Returns:
            Mapping dict matching the store document schema
        """
        counter = cls._next_counter()
        now = now or datetime.now(timezone.utc)
        if stored_date is None:
            stored_date = now - (age or timedelta(0))

        return {
            "key": key or f"key{counter}",
            "data": data if data is not None else {"n": counter},
            "storedDate": format_timestamp(stored_date)
        }

    @classmethod
    def create_batch(cls, count: int, **overrides) -> list:
        """Create multiple mappings with the same overrides."""
        return [cls.create(**overrides) for _ in range(count)]

    @classmethod
    def reset_counter(cls):
        """Reset the counter (call in test setup if needed)."""
        cls._counter = 0


def write_store(path: Path, mappings: list) -> None:
    """Write a store document directly, bypassing MappingStore."""
    path.write_text(json.dumps({"mappings": mappings}, indent=2), encoding="utf-8")


def read_store(path: Path) -> dict:
    """Read the raw store document."""
    return json.loads(path.read_text(encoding="utf-8"))

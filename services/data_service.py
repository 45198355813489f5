"""
Data service for storing and retrieving JSON payloads by key.

Keys are supplied by the caller. Storing under an existing key replaces
that mapping in place and refreshes its timestamp.
"""

import json
import math
from typing import Any
from urllib.parse import quote
import structlog

from models.mapping import Mapping, SetDataResponse
from services.mapping_store import MappingStore
from exceptions import (
    InvalidKeyError,
    MissingDataError,
    InvalidJSONError,
    MissingIdError,
    MappingNotFoundError,
)
from utils.time_utils import utc_now

logger = structlog.get_logger(__name__)


def _reject_constant(name: str) -> Any:
    """json.loads hook: NaN and Infinity are not JSON."""
    raise InvalidJSONError(f"{name} is not valid JSON")


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_non_finite(v) for v in value)
    return False


def build_access_url(key: str) -> str:
    """Relative URL for reading a stored key back."""
    return f"/getData?id={quote(key, safe='')}"


class DataService:
    """
    Put/get business logic over a MappingStore.

    No listing, deletion or partial update.
    """

    def __init__(self, store: MappingStore):
        self.store = store

    # ===================
    # VALIDATION
    # ===================

    @staticmethod
    def _clean_key(key: Any) -> str:
        if not isinstance(key, str) or not key.strip():
            raise InvalidKeyError()
        return key.strip()

    @staticmethod
    def _parse_data(raw_data: Any) -> Any:
        # 0 and false are valid payloads; only absent, null and "" are missing
        if raw_data is None or raw_data == "":
            raise MissingDataError()
        data = raw_data
        if isinstance(raw_data, str):
            try:
                data = json.loads(raw_data, parse_constant=_reject_constant)
            except json.JSONDecodeError as e:
                raise InvalidJSONError(e.msg) from e
        # Request bodies are decoded leniently and 1e999 overflows to inf
        if _has_non_finite(data):
            raise InvalidJSONError("NaN and Infinity are not valid JSON")
        return data

    # ===================
    # WRITE OPERATIONS
    # ===================

    def put(self, key: Any, raw_data: Any) -> SetDataResponse:
        """
        Store a payload under key.

        Args:
            key: Lookup key; must be a non-blank string
            raw_data: JSON text or an already-structured value

        Returns:
            Trimmed key and access URL

        Raises:
            InvalidKeyError: Key missing, blank or not a string
            MissingDataError: No data supplied
            InvalidJSONError: String data is not valid JSON
            StorageError: Store could not be read or written
        """
        clean_key = self._clean_key(key)
        data = self._parse_data(raw_data)

        with self.store.lock:
            document = self.store.load()
            mapping = Mapping(key=clean_key, data=data, stored_date=utc_now())

            index = document.find_index(clean_key)
            if index != -1:
                document.mappings[index] = mapping
            else:
                document.mappings.append(mapping)

            self.store.save(document)

        logger.info("mapping_stored", key=clean_key, replaced=index != -1)

        return SetDataResponse(
            key=clean_key,
            access_url=build_access_url(clean_key)
        )

    # ===================
    # READ OPERATIONS
    # ===================

    def get(self, id: Any) -> Mapping:
        """
        Look up a mapping by key.

        Matching is exact and case-sensitive on the trimmed id.

        Raises:
            MissingIdError: Id missing or blank
            MappingNotFoundError: Nothing stored under id
            StorageError: Store could not be read
        """
        if not isinstance(id, str) or not id.strip():
            raise MissingIdError()
        key = id.strip()

        mapping = self.store.load().find(key)
        if mapping is None:
            logger.info("mapping_not_found", key=key)
            raise MappingNotFoundError(key)

        return mapping

"""
Mapping schemas for the stored document and the data API.

A mapping is one stored key/data/timestamp triple. The store document is
{"mappings": [...]} with camelCase field names on disk and on the wire.
"""

from pydantic import Field, field_serializer, field_validator
from datetime import datetime
from typing import Any, Optional

from models.base import BaseSchema
from utils.time_utils import ensure_utc, format_timestamp


class Mapping(BaseSchema):
    """One stored submission."""

    key: str = Field(..., min_length=1, description="Trimmed lookup key")
    data: Any = Field(None, description="Stored JSON value, never interpreted")
    stored_date: datetime = Field(
        ...,
        alias="storedDate",
        description="Time of last write (UTC)"
    )

    @field_validator("stored_date")
    @classmethod
    def stored_date_as_utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)

    @field_serializer("stored_date")
    def serialize_stored_date(self, v: datetime) -> str:
        return format_timestamp(v)


class StoreDocument(BaseSchema):
    """The whole persisted store, in insertion order."""

    mappings: list[Mapping] = Field(default_factory=list)

    def find_index(self, key: str) -> int:
        """Index of the mapping stored under key, or -1."""
        for index, mapping in enumerate(self.mappings):
            if mapping.key == key:
                return index
        return -1

    def find(self, key: str) -> Optional[Mapping]:
        """Mapping stored under key, or None."""
        index = self.find_index(key)
        return self.mappings[index] if index != -1 else None


# ===================
# API SCHEMAS
# ===================

class SetDataRequest(BaseSchema):
    """
    Body of POST /setData.

    Both fields are left untyped so that wrong types reach the service
    validation and produce the standard 400 messages.
    """

    key: Any = None
    data: Any = None


class SetDataResponse(BaseSchema):
    """Successful store result."""

    success: bool = True
    message: str = "Data saved successfully"
    key: str
    access_url: str = Field(..., alias="accessUrl")


class GetDataResponse(BaseSchema):
    """Successful lookup result."""

    success: bool = True
    key: str
    data: Any = None
    stored_date: datetime = Field(..., alias="storedDate")

    @field_serializer("stored_date")
    def serialize_stored_date(self, v: datetime) -> str:
        return format_timestamp(v)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "GetDataResponse":
        return cls(key=mapping.key, data=mapping.data, stored_date=mapping.stored_date)

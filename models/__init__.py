"""
Pydantic models for the stored document and API payloads.
"""

from models.base import BaseSchema
from models.mapping import (
    Mapping,
    StoreDocument,
    SetDataRequest,
    SetDataResponse,
    GetDataResponse,
)

__all__ = [
    "BaseSchema",
    "Mapping",
    "StoreDocument",
    "SetDataRequest",
    "SetDataResponse",
    "GetDataResponse",
]

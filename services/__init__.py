"""
Business logic services.

Each service handles one concern; Services bundles them around a single
MappingStore.
"""

from services.mapping_store import MappingStore
from services.expiry_service import ExpiryService, age_in_days
from services.data_service import DataService, build_access_url
from services.access_log_service import AccessLogService
from services.error_log_service import ErrorLogService
from services.container import Services, build_services

__all__ = [
    "MappingStore",
    "ExpiryService",
    "age_in_days",
    "DataService",
    "build_access_url",
    "AccessLogService",
    "ErrorLogService",
    "Services",
    "build_services",
]

"""
Service wiring.

Builds one set of services per process from Settings. The application
lifespan attaches it to app.state; scripts build their own.
"""

from dataclasses import dataclass

from config.settings import Settings
from services.mapping_store import MappingStore
from services.expiry_service import ExpiryService
from services.data_service import DataService
from services.access_log_service import AccessLogService
from services.error_log_service import ErrorLogService


@dataclass
class Services:
    """Service instances sharing one MappingStore."""
    store: MappingStore
    expiry: ExpiryService
    data: DataService
    access_log: AccessLogService
    error_log: ErrorLogService


def build_services(settings: Settings) -> Services:
    """Create the store and every service that uses it."""
    store = MappingStore(settings.data_file)
    return Services(
        store=store,
        expiry=ExpiryService(store, retention_days=settings.retention_days),
        data=DataService(store),
        access_log=AccessLogService(
            settings.access_log_file,
            settings.performance_log_file,
            queue_size=settings.access_log_queue_size
        ),
        error_log=ErrorLogService(settings.error_log_file),
    )

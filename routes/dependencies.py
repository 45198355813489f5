"""
FastAPI dependencies handing request handlers the per-process services.

The services are created in the application lifespan and kept on app.state.
"""

from fastapi import Depends, Request

from config.settings import Settings
from services.container import Services
from services.data_service import DataService
from services.access_log_service import AccessLogService
from services.error_log_service import ErrorLogService


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_data_service(services: Services = Depends(get_services)) -> DataService:
    return services.data


def get_access_log_service(services: Services = Depends(get_services)) -> AccessLogService:
    return services.access_log


def get_error_log_service(services: Services = Depends(get_services)) -> ErrorLogService:
    return services.error_log

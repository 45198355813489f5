"""
Log API routes.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from services.access_log_service import AccessLogService
from services.error_log_service import ErrorLogService
from routes.dependencies import get_access_log_service, get_error_log_service
from routes.errors import handle_error

router = APIRouter()


@router.get("/getLogs", response_class=PlainTextResponse)
async def get_logs(
    access_log: AccessLogService = Depends(get_access_log_service),
    error_log: ErrorLogService = Depends(get_error_log_service)
):
    """Return the plain-text access log."""
    try:
        return PlainTextResponse(access_log.read_access_log())

    except Exception as e:
        return handle_error(e, error_log, "Error reading log file")

"""
Error conversion shared by the routers.
"""

from typing import Optional

from fastapi.responses import JSONResponse
import structlog

from exceptions import AppError
from services.error_log_service import ErrorLogService

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def handle_error(
    e: Exception,
    error_log: Optional[ErrorLogService] = None,
    internal_message: str = INTERNAL_ERROR_MESSAGE
) -> JSONResponse:
    """
    Convert exception to JSON response.

    Client errors keep their message. Server errors (5xx and anything
    unexpected) are written to the error log and answered with
    internal_message only.
    """
    if isinstance(e, AppError) and e.status_code < 500:
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )

    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    if error_log is not None:
        error_log.record(e)

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "message": internal_message,
            "code": e.code if isinstance(e, AppError) else "INTERNAL_ERROR"
        }
    )

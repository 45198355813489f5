"""
Data API routes.

POST /setData stores a JSON payload under a key; GET /get (and its alias
/getData, the form used in access URLs) reads it back.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from models.mapping import SetDataRequest, SetDataResponse, GetDataResponse
from services.data_service import DataService
from services.error_log_service import ErrorLogService
from routes.dependencies import get_data_service, get_error_log_service
from routes.errors import handle_error

router = APIRouter()


@router.post("/setData", response_model=SetDataResponse)
async def set_data(
    body: Optional[SetDataRequest] = None,
    service: DataService = Depends(get_data_service),
    error_log: ErrorLogService = Depends(get_error_log_service)
):
    """
    Store data under a key.

    data may be JSON text or an already-structured JSON value. An existing
    mapping with the same key is replaced.
    """
    body = body or SetDataRequest()
    try:
        return service.put(body.key, body.data)

    except Exception as e:
        return handle_error(e, error_log, "An error occurred while saving data")


@router.get("/get", response_model=GetDataResponse)
@router.get("/getData", response_model=GetDataResponse)
async def get_data(
    id: Optional[str] = Query(None, description="Key the data was stored under"),
    service: DataService = Depends(get_data_service),
    error_log: ErrorLogService = Depends(get_error_log_service)
):
    """
    Get stored data by key.

    Returns the key, the stored value and when it was stored.
    """
    try:
        mapping = service.get(id)
        return GetDataResponse.from_mapping(mapping)

    except Exception as e:
        return handle_error(e, error_log, "An error occurred while retrieving data")

"""
Static file routes for the browser page.

Serves files from the configured public directory. Registered last so the
API paths take precedence over /{filename}.
"""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from config.settings import Settings
from exceptions import ForbiddenPathError, StaticFileNotFoundError
from services.error_log_service import ErrorLogService
from routes.dependencies import get_app_settings, get_error_log_service
from routes.errors import handle_error

router = APIRouter()

INDEX_FILE = "index.html"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".svg": "image/svg+xml",
    ".gif": "image/gif",
    ".ico": "image/x-icon",
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
}


def content_type_for(path: Path) -> str:
    """Content type from the file extension (case-insensitive)."""
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def resolve_public_file(public_dir: Path, filename: str) -> Path:
    """
    Resolve filename inside public_dir.

    Raises:
        ForbiddenPathError: Resolved path is outside public_dir
        StaticFileNotFoundError: No regular file at that path
    """
    root = public_dir.resolve()
    target = (root / filename).resolve()

    if target != root and root not in target.parents:
        raise ForbiddenPathError()
    if not target.is_file():
        raise StaticFileNotFoundError(filename)
    return target


def serve_static_file(settings: Settings, filename: str, error_log: ErrorLogService) -> Response:
    try:
        path = resolve_public_file(Path(settings.public_dir), filename)
        return Response(content=path.read_bytes(), media_type=content_type_for(path))

    except Exception as e:
        return handle_error(e, error_log)


@router.get("/", include_in_schema=False)
async def index(
    settings: Settings = Depends(get_app_settings),
    error_log: ErrorLogService = Depends(get_error_log_service)
):
    return serve_static_file(settings, INDEX_FILE, error_log)


@router.get("/{filename}", include_in_schema=False)
async def static_file(
    filename: str,
    settings: Settings = Depends(get_app_settings),
    error_log: ErrorLogService = Depends(get_error_log_service)
):
    return serve_static_file(settings, filename, error_log)

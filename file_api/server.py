"""
File API server.

Issues short-lived presigned URLs so browsers can talk to S3 directly:
- GET    /api/health        : Health check
- GET    /api/files         : List objects (optional ?prefix=)
- POST   /api/upload-url    : Presigned PUT URL for one key
- GET    /api/download-url  : Presigned GET URL for one key
- DELETE /api/files         : Delete one object

Errors are returned as {"error": message}.
"""
from datetime import datetime
from typing import List, Optional

from fastapi import Body, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from bucket_sync.clients.s3_manager import S3Manager
from bucket_sync.models.config import ApiSettings
from bucket_sync.services.content_types import resolve_content_type


# Data models for API requests and responses
class FileItem(BaseModel):
    key: str
    size: int
    lastModified: datetime


class FileListResponse(BaseModel):
    items: List[FileItem]


class KeyRequest(BaseModel):
    key: Optional[str] = None


class UploadUrlRequest(KeyRequest):
    contentType: Optional[str] = None


class UploadUrlResponse(BaseModel):
    url: str
    key: str
    contentType: str


class DownloadUrlResponse(BaseModel):
    url: str
    key: str


class OkResponse(BaseModel):
    ok: bool = True


def _s3(request: Request) -> S3Manager:
    return request.app.state.s3_manager


def _expiry(request: Request) -> int:
    return request.app.state.settings.url_expiry


def create_app(settings: Optional[ApiSettings] = None, s3_manager: Optional[S3Manager] = None) -> FastAPI:
    """
    Build the file API application.

    Args:
        settings: API settings; read from the environment when omitted
        s3_manager: S3 client; built from settings when omitted
    """
    settings = settings or ApiSettings.from_env()
    missing = [name for name, value in (('S3_BUCKET', settings.s3.bucket),
                                        ('AWS_REGION', settings.s3.region)) if not value]
    if missing:
        logger.error(f"Missing required env vars: {', '.join(missing)}")

    app = FastAPI(
        title="File API",
        description="Presigned URL issuance for direct browser access to S3",
        version="1.0.0"
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.s3_manager = s3_manager or S3Manager(settings.s3)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.get("/api/health")
    async def health() -> OkResponse:
        """Health check endpoint."""
        return OkResponse()

    @app.get("/api/files")
    def list_files(request: Request, prefix: str = Query("")) -> FileListResponse:
        """List objects, optionally below a prefix to mimic folders."""
        try:
            items = [
                FileItem(key=obj.key, size=obj.size, lastModified=obj.last_modified)
                for obj in _s3(request).list_objects(prefix)
            ]
            return FileListResponse(items=items)
        except Exception as e:
            logger.error(f"Failed to list files with prefix '{prefix}': {e}")
            raise HTTPException(status_code=500, detail="Failed to list files")

    @app.post("/api/upload-url")
    def create_upload_url(request: Request, body: Optional[UploadUrlRequest] = Body(None)) -> UploadUrlResponse:
        """
        Presigned URL authorizing a single PUT to the given key.

        The content type falls back to one inferred from the key's extension.
        """
        if body is None or not body.key:
            raise HTTPException(status_code=400, detail="key is required")

        content_type = body.contentType or resolve_content_type(body.key)
        try:
            url = _s3(request).generate_upload_url(body.key, content_type, expires_in=_expiry(request))
            return UploadUrlResponse(url=url, key=body.key, contentType=content_type)
        except Exception as e:
            logger.error(f"Failed to create upload URL for {body.key}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create upload URL")

    @app.get("/api/download-url")
    def create_download_url(request: Request, key: Optional[str] = Query(None)) -> DownloadUrlResponse:
        """Presigned URL authorizing a GET of the given key."""
        if not key:
            raise HTTPException(status_code=400, detail="key is required")

        try:
            url = _s3(request).generate_download_url(key, expires_in=_expiry(request))
            return DownloadUrlResponse(url=url, key=key)
        except Exception as e:
            logger.error(f"Failed to create download URL for {key}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create download URL")

    @app.delete("/api/files")
    def delete_file(request: Request, body: Optional[KeyRequest] = Body(None)) -> OkResponse:
        """Delete the object named in the JSON body."""
        if body is None or not body.key:
            raise HTTPException(status_code=400, detail="key is required")

        try:
            _s3(request).delete_object(body.key)
            return OkResponse()
        except Exception as e:
            logger.error(f"Failed to delete {body.key}: {e}")
            raise HTTPException(status_code=500, detail="Failed to delete file")

    return app

"""
Bucket Sync - mirror local directory trees into S3-compatible object stores.
"""

from .services.sync_service import SyncService
from .services.uploader import BoundedUploader
from .models.config import SyncJob, S3Config, ApiSettings
from .models.data_models import FileEntry, UploadResult, SyncReport

__version__ = "1.0.0"
__all__ = [
    "SyncService",
    "BoundedUploader",
    "SyncJob",
    "S3Config",
    "ApiSettings",
    "FileEntry",
    "UploadResult",
    "SyncReport"
]

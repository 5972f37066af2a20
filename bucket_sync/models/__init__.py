"""
Models package for the bucket sync tool.
"""
from .data_models import FileEntry, UploadResult, SyncReport
from .config import S3Config, SyncJob, ApiSettings
from .errors import SyncError, InvalidConfig, DirectoryNotFound, FileReadError, TransferError

__all__ = [
    'FileEntry',
    'UploadResult',
    'SyncReport',
    'S3Config',
    'SyncJob',
    'ApiSettings',
    'SyncError',
    'InvalidConfig',
    'DirectoryNotFound',
    'FileReadError',
    'TransferError'
]

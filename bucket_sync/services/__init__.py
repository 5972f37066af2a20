# Services package
from .key_mapper import map_key, normalize_path
from .content_types import resolve_content_type
from .file_scanner import scan_directory, read_file
from .work_queue import WorkQueue
from .uploader import BoundedUploader, ObjectStore
from .sync_service import SyncService

__all__ = [
    'map_key',
    'normalize_path',
    'resolve_content_type',
    'scan_directory',
    'read_file',
    'WorkQueue',
    'BoundedUploader',
    'ObjectStore',
    'SyncService'
]

# Client packages
from .s3_manager import S3Manager, S3Object
from .file_api import FileAPI, FileAPIError

__all__ = ['S3Manager', 'S3Object', 'FileAPI', 'FileAPIError']

"""
File API - presigned URL service in front of the sync bucket.
"""
from .server import create_app

__all__ = ['create_app']

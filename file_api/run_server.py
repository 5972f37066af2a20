#!/usr/bin/env python3
"""
Startup script for the file API server.
"""
import sys

import uvicorn
from loguru import logger

from bucket_sync.main import setup_logging
from bucket_sync.models.config import ApiSettings
from bucket_sync.models.errors import InvalidConfig


def main():
    setup_logging()
    try:
        port = ApiSettings.from_env().port
    except InvalidConfig as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info("Starting File API Server...")
    logger.info("Available endpoints:")
    logger.info("  - GET    /api/health       : Health check")
    logger.info("  - GET    /api/files        : List files (?prefix=)")
    logger.info("  - POST   /api/upload-url   : Presigned upload URL")
    logger.info("  - GET    /api/download-url : Presigned download URL (?key=)")
    logger.info("  - DELETE /api/files        : Delete file")
    logger.info(f"Server listening on http://localhost:{port}")

    uvicorn.run(
        "file_api.server:create_app",
        factory=True,
        host="0.0.0.0",
        port=port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()

"""
HTTP client for the file API.

Wraps the file API endpoints:
- /api/health: liveness check
- /api/files: list and delete objects
- /api/upload-url, /api/download-url: presigned URL issuance

and performs the browser-style upload flow (request a presigned PUT URL,
then send the bytes straight to the store).
"""
from typing import Any, Dict, List, Optional

import requests
from loguru import logger


class FileAPIError(Exception):
    """Custom exception for file API errors."""
    pass


class FileAPI:
    """HTTP client for the file API server."""

    def __init__(self, base_url: str, timeout: int = 30):
        """
        Initialize file API client.

        Args:
            base_url: Base URL of the file API server
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make HTTP request against the file API.

        Raises:
            FileAPIError: If the request fails or returns an error status
        """
        url = f"{self.base_url}{endpoint}"

        try:
            logger.debug(f"Making {method} request to {url}")
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            logger.debug(f"Response status: {response.status_code}")
            response.raise_for_status()
            return response

        except requests.exceptions.RequestException as e:
            error_msg = f"File API request failed: {method} {url} - {str(e)}"
            logger.error(error_msg)
            raise FileAPIError(error_msg) from e

    def health_check(self) -> bool:
        """
        Check if the file API server is reachable.

        Returns:
            True if server is healthy, False otherwise
        """
        try:
            response = self._make_request(method="GET", endpoint="/api/health")
            return response.json().get("ok") is True
        except Exception as e:
            logger.warning(f"File API health check failed: {str(e)}")
            return False

    def list_files(self, prefix: str = "") -> List[Dict[str, Any]]:
        """List objects below a key prefix."""
        response = self._make_request(method="GET", endpoint="/api/files", params={"prefix": prefix})
        return response.json().get("items", [])

    def create_upload_url(self, key: str, content_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a presigned upload URL.

        Returns:
            Dictionary with url, key and contentType
        """
        if not key:
            raise ValueError("key cannot be empty")
        payload = {"key": key}
        if content_type:
            payload["contentType"] = content_type
        response = self._make_request(method="POST", endpoint="/api/upload-url", json=payload)
        return response.json()

    def create_download_url(self, key: str) -> Dict[str, Any]:
        """Request a presigned download URL."""
        if not key:
            raise ValueError("key cannot be empty")
        response = self._make_request(method="GET", endpoint="/api/download-url", params={"key": key})
        return response.json()

    def delete_file(self, key: str) -> bool:
        """Delete an object."""
        if not key:
            raise ValueError("key cannot be empty")
        response = self._make_request(method="DELETE", endpoint="/api/files", json={"key": key})
        return response.json().get("ok") is True

    def upload_bytes(self, key: str, body: bytes, content_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Upload bytes through a presigned URL.

        Args:
            key: Object key
            body: Content to upload
            content_type: MIME type; the server infers one when omitted

        Returns:
            The upload URL response (key and contentType used)

        Raises:
            FileAPIError: If either request fails
        """
        grant = self.create_upload_url(key, content_type)
        try:
            logger.info(f"Uploading {len(body)} bytes to {grant['key']}")
            response = self.session.put(
                grant["url"],
                data=body,
                headers={"Content-Type": grant["contentType"]},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            error_msg = f"Presigned upload of {key} failed: {str(e)}"
            logger.error(error_msg)
            raise FileAPIError(error_msg) from e
        return grant

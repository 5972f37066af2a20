"""
Configuration classes for the bucket sync tool and file API.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidConfig


DEFAULT_CONCURRENCY = 5


@dataclass
class S3Config:
    """Configuration for S3 service connection."""
    bucket: str
    region: str
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    endpoint: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'S3Config':
        """Create S3Config from the standard AWS/S3 environment variables."""
        return cls(
            bucket=os.getenv('S3_BUCKET', ''),
            region=os.getenv('AWS_REGION', ''),
            access_key=os.getenv('AWS_ACCESS_KEY_ID') or None,
            secret_key=os.getenv('AWS_SECRET_ACCESS_KEY') or None,
            endpoint=os.getenv('S3_ENDPOINT') or None
        )

    def validate(self) -> None:
        """Raise InvalidConfig if bucket or region is missing."""
        missing = [name for name, value in (('S3_BUCKET', self.bucket), ('AWS_REGION', self.region))
                   if not value]
        if missing:
            raise InvalidConfig(f"Missing {' or '.join(missing)} in environment.")


@dataclass(frozen=True)
class SyncJob:
    """
    A single directory-to-bucket sync run.

    Built once from CLI input; the root is resolved to an absolute path and
    the concurrency limit must be a positive integer.
    """
    root_dir: str
    prefix: str = ''
    concurrency: int = DEFAULT_CONCURRENCY
    dry_run: bool = False

    def __post_init__(self):
        if not self.root_dir:
            raise InvalidConfig("root directory is required")
        if isinstance(self.concurrency, bool) or not isinstance(self.concurrency, int):
            raise InvalidConfig(f"concurrency must be an integer, got {self.concurrency!r}")
        if self.concurrency <= 0:
            raise InvalidConfig(f"concurrency must be positive, got {self.concurrency}")
        object.__setattr__(self, 'root_dir', os.path.abspath(self.root_dir))
        object.__setattr__(self, 'prefix', self.prefix or '')


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidConfig(f"{name} must be an integer, got {value!r}") from None


def _list_env(name: str, default: List[str]) -> List[str]:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


@dataclass
class ApiSettings:
    """Settings for the file API server."""
    s3: S3Config
    port: int = 3000
    url_expiry: int = 300
    cors_origins: List[str] = field(default_factory=lambda: ['*'])

    @classmethod
    def from_env(cls) -> 'ApiSettings':
        """Create ApiSettings from environment variables."""
        return cls(
            s3=S3Config.from_env(),
            port=_int_env('PORT', 3000),
            url_expiry=_int_env('URL_EXPIRY_SECONDS', 300),  # 5 minutes
            cors_origins=_list_env('CORS_ORIGINS', ['*'])
        )

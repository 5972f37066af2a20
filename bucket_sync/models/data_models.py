"""
Core data models for the bucket sync tool.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List, Optional

from .errors import SyncError


@dataclass(frozen=True)
class FileEntry:
    """A local file discovered under the sync root."""
    relative_path: str
    absolute_path: str


@dataclass
class UploadResult:
    """Outcome of uploading one FileEntry."""
    index: int
    relative_path: str
    key: str
    content_type: Optional[str] = None
    size: Optional[int] = None
    dry_run: bool = False
    success: bool = False
    error: Optional[SyncError] = None

    @property
    def status(self) -> str:
        if not self.success:
            return 'failed'
        if self.dry_run:
            return 'skipped: dry run'
        return 'uploaded'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            'key': self.key,
            'relative_path': self.relative_path,
            'content_type': self.content_type,
            'size': self.size,
            'status': self.status,
            'error': str(self.error) if self.error else None,
            'error_type': type(self.error).__name__ if self.error else None
        }


@dataclass
class SyncReport:
    """Aggregate outcome of a sync run."""
    start_time: datetime
    end_time: Optional[datetime] = None
    results: List[UploadResult] = field(default_factory=list)

    @property
    def files_uploaded(self) -> int:
        return sum(1 for r in self.results if r.success and not r.dry_run)

    @property
    def files_skipped(self) -> int:
        return sum(1 for r in self.results if r.success and r.dry_run)

    @property
    def files_failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def total_bytes(self) -> int:
        return sum(r.size or 0 for r in self.results if r.success)

    @property
    def duration(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    @property
    def success(self) -> bool:
        return self.files_failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def failures(self) -> List[UploadResult]:
        return [r for r in self.results if not r.success]

    def to_dict(self) -> Dict[str, Any]:
        """Summary statistics, without the per-file results."""
        return {
            'start_time': self.start_time.isoformat(),
            'end_time': self.end_time.isoformat() if self.end_time else None,
            'duration_seconds': self.duration,
            'files_total': len(self.results),
            'files_uploaded': self.files_uploaded,
            'files_skipped': self.files_skipped,
            'files_failed': self.files_failed,
            'total_bytes': self.total_bytes,
            'success': self.success
        }

"""
Sync orchestrator: mirrors a local directory tree into an object store bucket.
"""
from datetime import datetime
from typing import Optional

from loguru import logger

from ..models.config import SyncJob
from ..models.data_models import SyncReport
from .file_scanner import scan_directory
from .uploader import BoundedUploader, ObjectStore


class SyncService:
    """
    Runs one SyncJob: scans the root directory, then uploads every file with
    the job's concurrency limit and reports the aggregate outcome.
    """

    def __init__(self, job: SyncJob, store: Optional[ObjectStore] = None, bucket: Optional[str] = None):
        """
        Initialize sync service.

        Args:
            job: The sync job to run
            store: Object store client (not needed for dry runs)
            bucket: Bucket name, used for log output only
        """
        self.job = job
        self.bucket = bucket or getattr(store, 'bucket', None) or '<bucket>'
        self.uploader = BoundedUploader(store, job.concurrency, dry_run=job.dry_run)

    def run(self) -> SyncReport:
        """
        Perform the sync.

        Returns:
            SyncReport with one result per discovered file

        Raises:
            DirectoryNotFound: If the root directory does not exist
        """
        report = SyncReport(start_time=datetime.now())

        entries = scan_directory(self.job.root_dir)
        if not entries:
            logger.info("No files found.")
            report.end_time = datetime.now()
            return report

        mode = " (dry run)" if self.job.dry_run else ""
        logger.info(f"Uploading {len(entries)} files to s3://{self.bucket}/{self.job.prefix}{mode}")

        report.results = self.uploader.upload(entries, self.job.prefix)
        report.end_time = datetime.now()

        logger.info(f"Sync completed - Uploaded: {report.files_uploaded}, "
                    f"Skipped: {report.files_skipped}, "
                    f"Failed: {report.files_failed}, "
                    f"Total size: {report.total_bytes} bytes, "
                    f"Duration: {report.duration:.2f} seconds")
        for failure in report.failures():
            logger.error(f"  {failure.key}: {type(failure.error).__name__}: {failure.error}")

        logger.info("Done.")
        return report

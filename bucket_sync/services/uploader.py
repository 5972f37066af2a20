"""
Bounded-concurrency uploader: pushes a list of local files to an object store
using a fixed number of worker threads.
"""
import threading
from typing import Callable, List, Optional, Protocol

from loguru import logger

from ..models.data_models import FileEntry, UploadResult
from ..models.errors import FileReadError, InvalidConfig, SyncError, TransferError
from .content_types import resolve_content_type
from .file_scanner import read_file
from .key_mapper import map_key
from .work_queue import WorkQueue


class ObjectStore(Protocol):
    """Store capability needed by the uploader."""

    def put(self, key: str, body: bytes, content_type: str) -> None:
        """Store body under key; raise TransferError on failure."""
        ...


class BoundedUploader:
    """
    Uploads files with at most ``concurrency`` transfers in flight.

    Workers pull indices from a shared WorkQueue until it is exhausted, so
    every file is handled by exactly one worker. Per-file failures are
    recorded in that file's UploadResult and never stop the other workers.
    """

    def __init__(self, store: Optional[ObjectStore], concurrency: int, dry_run: bool = False,
                 reader: Callable[[str], bytes] = read_file):
        """
        Args:
            store: Object store client; may be None in dry-run mode
            concurrency: Maximum number of concurrent workers
            dry_run: Log intended uploads without calling the store
            reader: Function returning a file's bytes from its absolute path
        """
        if concurrency <= 0:
            raise InvalidConfig(f"concurrency must be positive, got {concurrency}")
        if store is None and not dry_run:
            raise InvalidConfig("a store client is required unless running dry")
        self.store = store
        self.concurrency = concurrency
        self.dry_run = dry_run
        self.reader = reader

    def worker_count(self, total: int) -> int:
        return min(self.concurrency, total)

    def upload(self, entries: List[FileEntry], prefix: str = '') -> List[UploadResult]:
        """
        Upload all entries and wait for every worker to finish.

        Args:
            entries: Files to upload
            prefix: Key prefix applied to every file

        Returns:
            One UploadResult per entry, in the same order as entries
        """
        queue = WorkQueue(len(entries))
        results: List[Optional[UploadResult]] = [None] * len(entries)

        def worker():
            while True:
                index = queue.claim()
                if index is None:
                    break
                results[index] = self._process(index, entries[index], prefix)

        threads = [
            threading.Thread(target=worker, name=f"upload-worker-{n}", daemon=True)
            for n in range(self.worker_count(len(entries)))
        ]
        logger.debug(f"Starting {len(threads)} upload workers for {len(entries)} files")
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        return results

    def _process(self, index: int, entry: FileEntry, prefix: str) -> UploadResult:
        """Upload a single file; errors are captured in the result."""
        key = map_key(entry.relative_path, prefix)
        result = UploadResult(index=index, relative_path=entry.relative_path, key=key,
                              dry_run=self.dry_run)
        try:
            data = self._read(entry.absolute_path)
            result.size = len(data)
            result.content_type = resolve_content_type(entry.relative_path)

            if self.dry_run:
                logger.info(f"[dry] PUT {key} ({result.size} bytes)")
            else:
                self._put(key, data, result.content_type)
                logger.info(f"PUT {key}")
            result.success = True

        except SyncError as e:
            result.error = e
            logger.error(f"Failed {key} ({entry.relative_path}): {type(e).__name__}: {e}")
        return result

    def _read(self, path: str) -> bytes:
        try:
            return self.reader(path)
        except SyncError:
            raise
        except Exception as e:
            raise FileReadError(f"Cannot read {path}: {e}") from e

    def _put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            self.store.put(key, data, content_type)
        except SyncError:
            raise
        except Exception as e:
            raise TransferError(f"Upload of {key} failed: {e}") from e

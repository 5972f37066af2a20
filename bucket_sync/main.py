"""
Command line entry point: mirror a local directory into an S3 bucket.
"""
import argparse
import json
import os
import sys
from typing import List, Optional

from loguru import logger

from .clients.s3_manager import S3Manager
from .models.config import S3Config, SyncJob, DEFAULT_CONCURRENCY
from .models.errors import SyncError
from .services.sync_service import SyncService


USAGE = 'bucket-sync --dir "./folder" [--prefix "backup/"] [--dry] [--concurrency 5]'


def setup_logging(level: Optional[str] = None):
    """Configure logging for the sync tool."""
    # Remove default logger
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level or os.getenv('LOG_LEVEL', 'INFO')
    )

    log_file = os.getenv('LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bucket-sync',
        usage=USAGE,
        description='Upload every file under a directory to an S3 bucket.',
        epilog='Environment: S3_BUCKET, AWS_REGION (required); AWS_ACCESS_KEY_ID, '
               'AWS_SECRET_ACCESS_KEY, S3_ENDPOINT, LOG_LEVEL, LOG_FILE (optional).'
    )
    parser.add_argument('--dir', dest='dir', default='', help='Directory to upload')
    parser.add_argument('--prefix', default='', help='Key prefix, e.g. "backup/"')
    parser.add_argument('--dry', action='store_true', help='Print actions without uploading')
    parser.add_argument('--concurrency', type=int, default=DEFAULT_CONCURRENCY,
                        help=f'Parallel uploads (default: {DEFAULT_CONCURRENCY})')
    return parser


def run_sync(job: SyncJob, s3_config: S3Config) -> int:
    """
    Run a sync job and map its outcome to a process exit code.

    Returns:
        0 if every file succeeded, 1 otherwise
    """
    store = None if job.dry_run else S3Manager(s3_config)
    service = SyncService(job, store, bucket=s3_config.bucket)

    report = service.run()
    logger.debug(f"Sync Results: {json.dumps(report.to_dict(), indent=2, default=str)}")
    return report.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    setup_logging()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.dir:
        parser.print_usage(sys.stderr)
        return 1

    try:
        job = SyncJob(
            root_dir=args.dir,
            prefix=args.prefix,
            concurrency=args.concurrency,
            dry_run=args.dry
        )
        s3_config = S3Config.from_env()
        s3_config.validate()

        return run_sync(job, s3_config)

    except SyncError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    except Exception as e:
        logger.error(f"Sync failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

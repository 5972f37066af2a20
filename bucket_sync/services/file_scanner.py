"""
Recursive enumeration of the local files to sync.
"""
import os
from typing import List

from loguru import logger

from ..models.data_models import FileEntry
from ..models.errors import DirectoryNotFound, FileReadError


def _is_hidden(name: str) -> bool:
    return name.startswith('.')


def scan_directory(root_dir: str) -> List[FileEntry]:
    """
    List every regular file below a directory.

    Entries whose name starts with a dot are skipped, and hidden directories
    are not descended into. Symbolic links are skipped. Directories are
    walked in sorted order so the result is stable for an unchanged tree.

    Args:
        root_dir: Directory to scan

    Returns:
        List of FileEntry objects with slash-separated relative paths

    Raises:
        DirectoryNotFound: If root_dir does not exist or is not a directory
    """
    root = os.path.abspath(root_dir)
    if not os.path.isdir(root):
        raise DirectoryNotFound(f"Directory not found: {root}")

    entries = []

    def _on_error(error: OSError):
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    for current, dirs, files in os.walk(root, onerror=_on_error):
        dirs[:] = sorted(
            d for d in dirs
            if not _is_hidden(d) and not os.path.islink(os.path.join(current, d))
        )
        for name in sorted(files):
            if _is_hidden(name):
                continue
            absolute_path = os.path.join(current, name)
            if os.path.islink(absolute_path) or not os.path.isfile(absolute_path):
                continue
            relative_path = os.path.relpath(absolute_path, root).replace(os.sep, '/')
            entries.append(FileEntry(relative_path=relative_path, absolute_path=absolute_path))

    logger.debug(f"Found {len(entries)} files under {root}")
    return entries


def read_file(absolute_path: str) -> bytes:
    """
    Read a file's bytes.

    Raises:
        FileReadError: On any I/O error
    """
    try:
        with open(absolute_path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise FileReadError(f"Cannot read {absolute_path}: {e.strerror or e}") from e

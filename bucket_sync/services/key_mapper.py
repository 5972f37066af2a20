"""
Mapping of local relative paths to remote object keys.
"""


def normalize_path(relative_path: str) -> str:
    """Replace Windows path separators with forward slashes."""
    return relative_path.replace('\\', '/')


def map_key(relative_path: str, prefix: str = '') -> str:
    """
    Build the object key for a local file.

    Leading and trailing slashes are stripped from the prefix before it is
    joined to the normalized path, so ``map_key('sub\\b.jpg', 'backup/')``
    gives ``'backup/sub/b.jpg'``. An empty prefix leaves the path as is.

    Args:
        relative_path: Path of the file relative to the sync root
        prefix: Optional key prefix

    Returns:
        The object key
    """
    key = normalize_path(relative_path)
    trimmed = (prefix or '').strip('/')
    if trimmed:
        return f"{trimmed}/{key}"
    return key

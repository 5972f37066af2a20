"""
Tests for Content-Type resolution.
"""
import pytest

from bucket_sync.services.content_types import resolve_content_type, DEFAULT_CONTENT_TYPE


@pytest.mark.parametrize('filename, expected', [
    ('photo.jpg', 'image/jpeg'),
    ('photo.jpeg', 'image/jpeg'),
    ('PHOTO.JPG', 'image/jpeg'),
    ('notes.txt', 'text/plain'),
    ('report.pdf', 'application/pdf'),
    ('index.html', 'text/html'),
    ('data.json', 'application/json'),
    ('archive.tar.gz', 'application/gzip'),
    ('sub/dir/image.png', 'image/png'),
    ('sub\\dir\\image.png', 'image/png'),
])
def test_known_extensions(filename, expected):
    assert resolve_content_type(filename) == expected


@pytest.mark.parametrize('filename', [
    'file.xyz',
    'Makefile',
    '.bashrc',
    'dir.d/README',
    'trailing.',
    '',
    None,
])
def test_unknown_or_missing_extension_falls_back(filename):
    assert resolve_content_type(filename) == DEFAULT_CONTENT_TYPE
    assert DEFAULT_CONTENT_TYPE == 'application/octet-stream'

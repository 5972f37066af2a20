"""
Pytest configuration and fixtures for the bucket sync tests.
"""
import os
import threading
import time

import pytest
from loguru import logger

from bucket_sync.models.config import S3Config


class FakeStore:
    """Thread-safe in-memory object store recording every put."""

    def __init__(self, delay: float = 0.0, fail_keys=(), error: Exception = None):
        self.bucket = 'fake-bucket'
        self.delay = delay
        self.fail_keys = set(fail_keys)
        self.error = error
        self.objects = {}
        self.puts = []
        self.thread_ids = set()
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def put(self, key, body, content_type):
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            self.thread_ids.add(threading.get_ident())
        try:
            if self.delay:
                time.sleep(self.delay)
            if key in self.fail_keys:
                raise self.error or RuntimeError(f"store refused {key}")
            with self._lock:
                self.puts.append((key, body, content_type))
                self.objects[key] = (body, content_type)
        finally:
            with self._lock:
                self.active -= 1

    @property
    def keys(self):
        return [key for key, _, _ in self.puts]


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables for all tests."""
    test_env = {
        'S3_BUCKET': 'test-bucket',
        'AWS_REGION': 'us-east-1',
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
    }
    previous = {key: os.environ.get(key) for key in test_env}
    os.environ.update(test_env)

    yield

    for key, value in previous.items():
        if value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = value


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def s3_config():
    return S3Config(
        bucket='test-bucket',
        region='us-east-1',
        access_key='test_key',
        secret_key='test_secret',
        endpoint='http://localhost:9000'
    )


@pytest.fixture
def sample_tree(tmp_path):
    """Directory with a.txt, sub/b.jpg and .hidden/c.txt."""
    (tmp_path / 'a.txt').write_bytes(b'alpha')
    (tmp_path / 'sub').mkdir()
    (tmp_path / 'sub' / 'b.jpg').write_bytes(b'\xff\xd8\xff\xe0jpeg')
    (tmp_path / '.hidden').mkdir()
    (tmp_path / '.hidden' / 'c.txt').write_bytes(b'secret')
    return tmp_path


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record['message']), level="DEBUG")
    yield messages
    logger.remove(handler_id)

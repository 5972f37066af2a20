"""
Tests for configuration classes.
"""
import dataclasses
import os

import pytest

from bucket_sync.models.config import ApiSettings, S3Config, SyncJob
from bucket_sync.models.errors import InvalidConfig


class TestSyncJob:
    """Test cases for SyncJob."""

    def test_defaults(self, tmp_path):
        job = SyncJob(root_dir=str(tmp_path))

        assert job.prefix == ''
        assert job.concurrency == 5
        assert job.dry_run is False

    def test_root_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        job = SyncJob(root_dir='folder')

        assert job.root_dir == os.path.join(str(tmp_path), 'folder')

    def test_none_prefix_becomes_empty(self, tmp_path):
        assert SyncJob(root_dir=str(tmp_path), prefix=None).prefix == ''

    @pytest.mark.parametrize('concurrency', [0, -3])
    def test_non_positive_concurrency_rejected(self, tmp_path, concurrency):
        with pytest.raises(InvalidConfig, match="concurrency"):
            SyncJob(root_dir=str(tmp_path), concurrency=concurrency)

    @pytest.mark.parametrize('concurrency', ['5', 2.5, True])
    def test_non_integer_concurrency_rejected(self, tmp_path, concurrency):
        with pytest.raises(InvalidConfig):
            SyncJob(root_dir=str(tmp_path), concurrency=concurrency)

    def test_missing_root_rejected(self):
        with pytest.raises(InvalidConfig, match="root directory"):
            SyncJob(root_dir='')

    def test_immutable(self, tmp_path):
        job = SyncJob(root_dir=str(tmp_path))

        with pytest.raises(dataclasses.FrozenInstanceError):
            job.concurrency = 10


class TestS3Config:
    """Test cases for S3Config."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('S3_BUCKET', 'my-bucket')
        monkeypatch.setenv('AWS_REGION', 'eu-west-1')
        monkeypatch.setenv('S3_ENDPOINT', 'http://minio:9000')

        config = S3Config.from_env()

        assert config.bucket == 'my-bucket'
        assert config.region == 'eu-west-1'
        assert config.endpoint == 'http://minio:9000'
        assert config.access_key == 'testing'

    def test_optional_values_default_to_none(self, monkeypatch):
        monkeypatch.delenv('AWS_ACCESS_KEY_ID', raising=False)
        monkeypatch.delenv('AWS_SECRET_ACCESS_KEY', raising=False)
        monkeypatch.delenv('S3_ENDPOINT', raising=False)

        config = S3Config.from_env()

        assert config.access_key is None
        assert config.secret_key is None
        assert config.endpoint is None

    def test_validate_passes(self, s3_config):
        s3_config.validate()

    @pytest.mark.parametrize('bucket, region, missing', [
        ('', 'us-east-1', 'S3_BUCKET'),
        ('bucket', '', 'AWS_REGION'),
        ('', '', 'S3_BUCKET or AWS_REGION'),
    ])
    def test_validate_reports_missing(self, bucket, region, missing):
        with pytest.raises(InvalidConfig, match=missing):
            S3Config(bucket=bucket, region=region).validate()


class TestApiSettings:
    """Test cases for ApiSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv('PORT', raising=False)
        monkeypatch.delenv('URL_EXPIRY_SECONDS', raising=False)

        settings = ApiSettings.from_env()

        assert settings.port == 3000
        assert settings.url_expiry == 300
        assert settings.s3.bucket == 'test-bucket'

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv('PORT', '8080')
        monkeypatch.setenv('URL_EXPIRY_SECONDS', '60')

        settings = ApiSettings.from_env()

        assert settings.port == 8080
        assert settings.url_expiry == 60

    @pytest.mark.parametrize('variable', ['PORT', 'URL_EXPIRY_SECONDS'])
    def test_malformed_integer_names_variable(self, monkeypatch, variable):
        monkeypatch.setenv(variable, 'five')

        with pytest.raises(InvalidConfig, match=variable):
            ApiSettings.from_env()

    def test_cors_origins_default(self, monkeypatch):
        monkeypatch.delenv('CORS_ORIGINS', raising=False)

        assert ApiSettings.from_env().cors_origins == ['*']

    def test_cors_origins_from_env(self, monkeypatch):
        monkeypatch.setenv('CORS_ORIGINS', 'http://a.example, http://b.example,')

        assert ApiSettings.from_env().cors_origins == ['http://a.example', 'http://b.example']

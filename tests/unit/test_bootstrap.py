"""Unit tests for application wiring."""

from unittest.mock import MagicMock, patch

import pytest

from dataset_publisher.infrastructure.ckan.metadata_sync import CkanMetadataSync, NullMetadataSync
from dataset_publisher.infrastructure.config.settings import Settings
from dataset_publisher.infrastructure.runtime.bootstrap import (
    bootstrap,
    build_legacy_server,
    build_metadata_sync,
    build_storage,
    build_wizard,
)
from dataset_publisher.infrastructure.storage.memory import (
    InMemoryDatasetRepository,
    InMemoryTopicCatalog,
)
from dataset_publisher.infrastructure.storage.s3 import S3DatasetRepository, S3TopicCatalog


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_memory_storage():
    """Test the default backend keeps datasets in memory."""
    repository, topics = build_storage(_settings())

    assert isinstance(repository, InMemoryDatasetRepository)
    assert isinstance(topics, InMemoryTopicCatalog)


def test_s3_storage():
    """Test the s3 backend."""
    settings = _settings(storage_backend="s3", aws_s3_bucket="datasets-bucket", dataset_key_prefix="drafts")

    with patch("dataset_publisher.infrastructure.aws.s3_io.boto3"):
        repository, topics = build_storage(settings)

    assert isinstance(repository, S3DatasetRepository)
    assert repository.prefix == "drafts"
    assert isinstance(topics, S3TopicCatalog)


def test_metadata_sync_disabled_without_url():
    """Test the sync is a no-op without a catalog URL."""
    assert isinstance(build_metadata_sync(_settings(), MagicMock()), NullMetadataSync)


def test_metadata_sync_enabled():
    """Test the CKAN adapter is used when a URL is set."""
    sync = build_metadata_sync(_settings(ckan_url="https://ckan.example", ckan_api_key="secret"), MagicMock())

    assert isinstance(sync, CkanMetadataSync)
    assert sync.api_key == "secret"


def test_build_wizard_keeps_given_adapters():
    """Test explicit adapters are used, even when empty."""
    repository = InMemoryDatasetRepository()
    topics = InMemoryTopicCatalog()
    sink = MagicMock()

    wizard = build_wizard(_settings(), sink=sink, repository=repository, topics=topics)

    assert wizard.repository is repository
    assert wizard.topics is topics
    assert wizard.sink is sink


def test_legacy_server_requires_credentials():
    """Test the legacy client needs a host and key."""
    with pytest.raises(ValueError):
        build_legacy_server(_settings(legacy_host="https://legacy.example"))

    server = build_legacy_server(
        _settings(legacy_host="https://legacy.example", legacy_api_key="secret"),
        sink=MagicMock(),
    )
    assert server.config.api_key == "secret"


def test_bootstrap_initialises_sentry():
    """Test Sentry is only initialised with a DSN."""
    module = "dataset_publisher.infrastructure.runtime.bootstrap"
    with patch(f"{module}.sentry_sdk") as mock_sentry, patch(f"{module}.start_metrics_server") as mock_metrics:
        bootstrap(_settings())
        mock_sentry.init.assert_not_called()

        bootstrap(_settings(sentry_dsn="https://key@sentry.example/1", prometheus_enabled=True))
        mock_sentry.init.assert_called_once()
        mock_metrics.assert_called_once()

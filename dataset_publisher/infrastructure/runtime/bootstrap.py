"""Application wiring."""

import sentry_sdk
import structlog

from dataset_publisher.domain.ports import (
    DatasetRepositoryPort,
    MetadataSyncPort,
    ObservabilitySinkPort,
    TopicCatalogPort,
)
from dataset_publisher.infrastructure.aws.s3_io import S3IO
from dataset_publisher.infrastructure.ckan.metadata_sync import CkanMetadataSync, NullMetadataSync
from dataset_publisher.infrastructure.config.settings import Settings
from dataset_publisher.infrastructure.legacy.server import LegacyServer, LegacyServerConfig
from dataset_publisher.infrastructure.observability.logging import configure_logging
from dataset_publisher.infrastructure.observability.sink import SentryObservabilitySink
from dataset_publisher.infrastructure.runtime.clock import SystemClock
from dataset_publisher.infrastructure.runtime.health import start_metrics_server
from dataset_publisher.infrastructure.storage.memory import (
    InMemoryDatasetRepository,
    InMemoryTopicCatalog,
)
from dataset_publisher.infrastructure.storage.s3 import S3DatasetRepository, S3TopicCatalog
from dataset_publisher.interfaces.wizard.dataset_wizard import DatasetWizard

logger = structlog.get_logger()


def build_storage(settings: Settings) -> tuple[DatasetRepositoryPort, TopicCatalogPort]:
    """Storage adapters for the configured backend."""
    if settings.storage_backend == "s3":
        s3_io = S3IO(settings)
        return (
            S3DatasetRepository(s3_io, settings.dataset_key_prefix),
            S3TopicCatalog(s3_io, settings.topics_key),
        )
    return InMemoryDatasetRepository(), InMemoryTopicCatalog()


def build_metadata_sync(settings: Settings, sink: ObservabilitySinkPort) -> MetadataSyncPort:
    """Metadata sync adapter, disabled without a catalog URL."""
    if not settings.ckan_url:
        return NullMetadataSync()
    return CkanMetadataSync(
        settings.ckan_url,
        settings.ckan_api_key,
        sink,
        timeout_seconds=settings.http_timeout_seconds,
    )


def build_wizard(
    settings: Settings,
    sink: ObservabilitySinkPort | None = None,
    repository: DatasetRepositoryPort | None = None,
    topics: TopicCatalogPort | None = None,
) -> DatasetWizard:
    """Wire the wizard from settings; explicit adapters take precedence."""
    sink = sink or SentryObservabilitySink()
    if repository is None or topics is None:
        default_repository, default_topics = build_storage(settings)
        repository = default_repository if repository is None else repository
        topics = default_topics if topics is None else topics

    return DatasetWizard(
        repository=repository,
        topics=topics,
        metadata_sync=build_metadata_sync(settings, sink),
        sink=sink,
        clock=SystemClock(),
    )


def build_legacy_server(settings: Settings, sink: ObservabilitySinkPort | None = None) -> LegacyServer:
    """Legacy API client from settings."""
    if not settings.legacy_host or not settings.legacy_api_key:
        raise ValueError("legacy_host and legacy_api_key must be set to use the legacy API")
    config = LegacyServerConfig(
        host=settings.legacy_host,
        api_key=settings.legacy_api_key,
        timeout_seconds=settings.http_timeout_seconds,
    )
    return LegacyServer(config, sink or SentryObservabilitySink())


def bootstrap(settings: Settings | None = None) -> DatasetWizard:
    """Configure logging, error reporting and metrics, then build the wizard."""
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_json)

    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.sentry_environment,
            send_default_pii=False,
        )

    if settings.prometheus_enabled:
        start_metrics_server(settings)

    logger.info(
        "settings_loaded",
        storage_backend=settings.storage_backend,
        bucket=settings.aws_s3_bucket,
        metadata_sync_enabled=bool(settings.ckan_url),
        legacy_configured=bool(settings.legacy_host),
        sentry_enabled=bool(settings.sentry_dsn),
    )
    return build_wizard(settings)

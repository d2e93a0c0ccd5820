"""Publish a dataset draft."""

import structlog

from dataset_publisher.application.services.lifecycle import mark_published
from dataset_publisher.application.use_cases.sync_metadata import run as sync_metadata
from dataset_publisher.domain.entities import Dataset
from dataset_publisher.domain.ports import (
    ClockPort,
    DatasetRepositoryPort,
    MetadataSyncPort,
    ObservabilitySinkPort,
)

logger = structlog.get_logger()


async def run(
    dataset_id: str,
    repository: DatasetRepositoryPort,
    metadata_sync: MetadataSyncPort,
    sink: ObservabilitySinkPort,
    clock: ClockPort,
) -> Dataset:
    """Publish a dataset.

    The completeness guard is checked against the stored dataset at commit
    time.
    Raises a WorkflowError and leaves the stored status untouched when the
    dataset cannot be published.
    """
    dataset = await repository.get(dataset_id)
    mark_published(dataset, clock.now())
    await repository.save(dataset)

    logger.info("dataset_published", dataset_id=dataset.id, uuid=dataset.uuid)

    await sync_metadata(dataset, metadata_sync, sink)
    return dataset

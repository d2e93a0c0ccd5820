"""Start a new dataset draft."""

import uuid

import structlog

from dataset_publisher.domain.entities import Dataset
from dataset_publisher.domain.ports import ClockPort, DatasetRepositoryPort

logger = structlog.get_logger()


async def run(
    creator_id: str,
    organisation_id: str,
    repository: DatasetRepositoryPort,
    clock: ClockPort,
) -> Dataset:
    """Create and store an empty draft owned by a user and organisation."""
    now = clock.now()
    dataset = Dataset(
        id=await repository.next_identity(),
        uuid=str(uuid.uuid4()),
        organisation_id=organisation_id,
        creator_id=creator_id,
        created_at=now,
        updated_at=now,
    )
    await repository.save(dataset)

    logger.info(
        "draft_started",
        dataset_id=dataset.id,
        uuid=dataset.uuid,
        organisation_id=organisation_id,
        creator_id=creator_id,
    )
    return dataset

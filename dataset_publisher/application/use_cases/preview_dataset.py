"""Build the summary shown before publishing."""

from dataset_publisher.application.dto.wizard import PublishPreview
from dataset_publisher.application.services.lifecycle import (
    lifecycle_state,
    missing_requirements,
)
from dataset_publisher.application.services.messages import FREQUENCY_LABELS, LICENCE_TITLES
from dataset_publisher.domain.enums import Licence
from dataset_publisher.domain.ports import DatasetRepositoryPort, TopicCatalogPort


async def run(
    dataset_id: str,
    repository: DatasetRepositoryPort,
    topics: TopicCatalogPort,
) -> PublishPreview:
    """Summarise a dataset for review."""
    dataset = await repository.get(dataset_id)

    topic_title = await topics.get_title(dataset.topic_id) if dataset.topic_id else None
    licence_title = LICENCE_TITLES[Licence(dataset.licence_code)] if dataset.licence_code else None
    frequency_label = FREQUENCY_LABELS[dataset.frequency] if dataset.frequency else None

    return PublishPreview(
        dataset_id=dataset.id,
        uuid=dataset.uuid,
        status=dataset.status,
        state=lifecycle_state(dataset),
        missing=missing_requirements(dataset),
        organisation_id=dataset.organisation_id,
        title=dataset.title,
        summary=dataset.summary,
        description=dataset.description,
        topic_title=topic_title,
        licence_title=licence_title,
        locations=[
            location
            for location in (dataset.location1, dataset.location2, dataset.location3)
            if location
        ],
        frequency_label=frequency_label,
        link_names=[link.name for link in dataset.links],
        doc_names=[doc.name for doc in dataset.docs],
    )

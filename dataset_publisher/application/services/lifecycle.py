"""Dataset lifecycle: completeness checks and the publish transition."""

from dataset_publisher.domain.entities import Dataset
from dataset_publisher.domain.enums import DatasetStatus, LifecycleState
from dataset_publisher.domain.errors import (
    DatasetAlreadyPublishedError,
    DatasetNotPublishableError,
)
from dataset_publisher.domain.types import Timestamp

REQUIRED_FIELDS = (
    "title",
    "summary",
    "description",
    "topic_id",
    "licence_code",
    "frequency",
)


def missing_requirements(dataset: Dataset) -> list[str]:
    """Publication requirements the dataset does not meet yet."""
    missing = []
    for name in REQUIRED_FIELDS:
        value = getattr(dataset, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    if not dataset.links:
        missing.append("links")
    return missing


def lifecycle_state(dataset: Dataset) -> LifecycleState:
    """Lifecycle state of a dataset."""
    if dataset.status == DatasetStatus.PUBLISHED:
        return LifecycleState.PUBLISHED
    if missing_requirements(dataset):
        return LifecycleState.DRAFT_INCOMPLETE
    return LifecycleState.DRAFT_COMPLETE


def ensure_publishable(dataset: Dataset) -> None:
    """Raise a workflow error unless the dataset can be published now."""
    if dataset.status == DatasetStatus.PUBLISHED:
        raise DatasetAlreadyPublishedError(f"Dataset {dataset.id} is already published")

    missing = missing_requirements(dataset)
    if missing:
        raise DatasetNotPublishableError(missing)


def mark_published(dataset: Dataset, published_at: Timestamp) -> None:
    """Move a complete draft to published."""
    ensure_publishable(dataset)
    dataset.status = DatasetStatus.PUBLISHED
    dataset.published_at = published_at
    dataset.updated_at = published_at

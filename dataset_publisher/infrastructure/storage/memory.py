"""In-memory storage adapters."""

import itertools

from dataset_publisher.domain.entities import Dataset
from dataset_publisher.domain.errors import DatasetNotFoundError
from dataset_publisher.domain.ports import DatasetRepositoryPort, TopicCatalogPort
from dataset_publisher.infrastructure.storage.documents import DatasetDocument


class InMemoryDatasetRepository(DatasetRepositoryPort):
    """Dataset repository holding serialized copies in a dict.

    Stored copies are detached from the caller's objects, so unsaved changes
    never leak into storage.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._documents: dict[str, DatasetDocument] = {}
        self._ids = itertools.count(1)

    async def next_identity(self) -> str:
        """Allocate a new dataset id."""
        return str(next(self._ids))

    async def get(self, dataset_id: str) -> Dataset:
        """Load a dataset."""
        document = self._documents.get(dataset_id)
        if document is None:
            raise DatasetNotFoundError(f"Dataset {dataset_id} not found")
        return document.to_entity()

    async def save(self, dataset: Dataset) -> None:
        """Store a dataset."""
        self._documents[dataset.id] = DatasetDocument.from_entity(dataset)

    def __len__(self) -> int:
        return len(self._documents)


class InMemoryTopicCatalog(TopicCatalogPort):
    """Topic catalog backed by a dict of id to title."""

    def __init__(self, topics: dict[str, str] | None = None) -> None:
        """Initialize with topic titles keyed by id."""
        self._topics = dict(topics or {})

    async def topic_ids(self) -> frozenset[str]:
        """Get ids of all existing topics."""
        return frozenset(self._topics)

    async def get_title(self, topic_id: str) -> str | None:
        """Get a topic title."""
        return self._topics.get(topic_id)

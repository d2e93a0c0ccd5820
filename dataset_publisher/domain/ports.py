"""Ports (interfaces) for infrastructure adapters."""

from abc import ABC, abstractmethod

from dataset_publisher.domain.entities import Dataset, ExternalResult
from dataset_publisher.domain.types import JsonValue, Timestamp


class DatasetRepositoryPort(ABC):
    """Port for durable dataset storage keyed by dataset id."""

    @abstractmethod
    async def next_identity(self) -> str:
        """Allocate a new dataset id."""

    @abstractmethod
    async def get(self, dataset_id: str) -> Dataset:
        """Load a dataset, raising DatasetNotFoundError when absent."""

    @abstractmethod
    async def save(self, dataset: Dataset) -> None:
        """Store a dataset, replacing any previous version (last write wins)."""


class TopicCatalogPort(ABC):
    """Port for reading the topics a dataset can be filed under."""

    @abstractmethod
    async def topic_ids(self) -> frozenset[str]:
        """Get ids of all existing topics."""

    @abstractmethod
    async def get_title(self, topic_id: str) -> str | None:
        """Get a topic title, or None for unknown topics."""


class MetadataSyncPort(ABC):
    """Port for pushing dataset metadata to the external catalog."""

    @abstractmethod
    async def sync(self, dataset: Dataset) -> ExternalResult:
        """Push known dataset fields; failures come back as Unavailable."""


class ObservabilitySinkPort(ABC):
    """Port for reporting failures of external collaborators."""

    @abstractmethod
    def report_failure(
        self,
        collaborator: str,
        message: str,
        context: dict[str, JsonValue],
    ) -> None:
        """Report a failed external call."""


class ClockPort(ABC):
    """Port for time operations."""

    @abstractmethod
    def now(self) -> Timestamp:
        """Get current timestamp."""

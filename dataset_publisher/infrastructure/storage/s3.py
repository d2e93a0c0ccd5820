"""S3-backed storage adapters."""

import uuid

import structlog

from dataset_publisher.domain.entities import Dataset
from dataset_publisher.domain.errors import DatasetNotFoundError
from dataset_publisher.domain.ports import DatasetRepositoryPort, TopicCatalogPort
from dataset_publisher.infrastructure.aws.s3_io import S3IO, S3ObjectNotFound
from dataset_publisher.infrastructure.storage.documents import DatasetDocument

logger = structlog.get_logger()


def dataset_key(prefix: str, dataset_id: str) -> str:
    """S3 key of a dataset document."""
    return f"{prefix.strip('/')}/{dataset_id}.json"


class S3DatasetRepository(DatasetRepositoryPort):
    """Dataset repository storing one JSON document per dataset."""

    def __init__(self, s3_io: S3IO, prefix: str) -> None:
        """Initialize repository."""
        self.s3_io = s3_io
        self.prefix = prefix

    async def next_identity(self) -> str:
        """Allocate a new dataset id."""
        return uuid.uuid4().hex

    async def get(self, dataset_id: str) -> Dataset:
        """Load a dataset from S3."""
        key = dataset_key(self.prefix, dataset_id)
        try:
            data = await self.s3_io.get_json(key)
        except S3ObjectNotFound as e:
            raise DatasetNotFoundError(f"Dataset {dataset_id} not found") from e
        return DatasetDocument.model_validate(data).to_entity()

    async def save(self, dataset: Dataset) -> None:
        """Write a dataset to S3, replacing the stored version."""
        key = dataset_key(self.prefix, dataset.id)
        document = DatasetDocument.from_entity(dataset)
        await self.s3_io.put_json(key, document.model_dump(mode="json"))
        logger.debug("dataset_saved", dataset_id=dataset.id, key=key, bucket=self.s3_io.bucket)


class S3TopicCatalog(TopicCatalogPort):
    """Topic catalog read from a JSON document of ``[{id, title}]`` entries."""

    def __init__(self, s3_io: S3IO, key: str) -> None:
        """Initialize catalog."""
        self.s3_io = s3_io
        self.key = key

    async def _topics(self) -> dict[str, str]:
        data = await self.s3_io.get_json(self.key)
        return {str(topic["id"]): topic["title"] for topic in data.get("topics", [])}

    async def topic_ids(self) -> frozenset[str]:
        """Get ids of all existing topics."""
        return frozenset(await self._topics())

    async def get_title(self, topic_id: str) -> str | None:
        """Get a topic title."""
        return (await self._topics()).get(topic_id)

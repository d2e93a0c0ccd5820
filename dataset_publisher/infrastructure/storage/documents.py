"""Stored dataset document structure."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from dataset_publisher.domain.entities import Dataset, LinkEntry
from dataset_publisher.domain.enums import DatasetStatus, Frequency, LinkKind


class LinkDocument(BaseModel):
    """Stored link entry."""

    id: str
    kind: LinkKind
    url: str
    name: str
    day: int | None = None
    month: int | None = None
    quarter: int | None = None
    year: int | None = None
    end_date: date | None = None

    @classmethod
    def from_entity(cls, link: LinkEntry) -> "LinkDocument":
        """Build from a link entry."""
        return cls(
            id=link.id,
            kind=link.kind,
            url=link.url,
            name=link.name,
            day=link.day,
            month=link.month,
            quarter=link.quarter,
            year=link.year,
            end_date=link.end_date,
        )

    def to_entity(self) -> LinkEntry:
        """Convert to a link entry."""
        return LinkEntry(**self.model_dump())


class DatasetDocument(BaseModel):
    """Stored dataset, one JSON document per dataset id."""

    id: str
    uuid: str
    organisation_id: str
    creator_id: str
    created_at: datetime
    updated_at: datetime
    name: str = ""
    title: str | None = None
    summary: str | None = None
    description: str | None = None
    topic_id: str | None = None
    licence_code: str | None = None
    location1: str | None = None
    location2: str | None = None
    location3: str | None = None
    frequency: Frequency | None = None
    status: DatasetStatus = DatasetStatus.DRAFT
    published_at: datetime | None = None
    links: list[LinkDocument] = Field(default_factory=list)
    docs: list[LinkDocument] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, dataset: Dataset) -> "DatasetDocument":
        """Build from a dataset."""
        fields = {
            name: getattr(dataset, name)
            for name in cls.model_fields
            if name not in ("links", "docs")
        }
        return cls(
            **fields,
            links=[LinkDocument.from_entity(link) for link in dataset.links],
            docs=[LinkDocument.from_entity(doc) for doc in dataset.docs],
        )

    def to_entity(self) -> Dataset:
        """Convert to a dataset."""
        fields = self.model_dump(exclude={"links", "docs"})
        return Dataset(
            **fields,
            links=[link.to_entity() for link in self.links],
            docs=[doc.to_entity() for doc in self.docs],
        )

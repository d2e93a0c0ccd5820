"""Domain entities."""

from dataclasses import dataclass, field
from datetime import date

from dataset_publisher.domain.enums import (
    DatasetStatus,
    Frequency,
    LinkKind,
    MessageKind,
)
from dataset_publisher.domain.types import JsonValue, Timestamp


@dataclass(frozen=True)
class LinkEntry:
    """Link to a data file or supporting document.

    ``end_date`` is derived from the period fields and the owning dataset's
    frequency; callers never set it directly.
    """

    id: str
    kind: LinkKind
    url: str
    name: str
    day: int | None = None
    month: int | None = None
    quarter: int | None = None
    year: int | None = None
    end_date: date | None = None

    def same_target(self, other: "LinkEntry") -> bool:
        """Whether both entries point at the same named URL."""
        return (self.kind, self.url, self.name) == (other.kind, other.url, other.name)


@dataclass
class Dataset:
    """Dataset aggregate built by the publication wizard."""

    id: str
    uuid: str
    organisation_id: str
    creator_id: str
    created_at: Timestamp
    updated_at: Timestamp
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
    published_at: Timestamp | None = None
    links: list[LinkEntry] = field(default_factory=list)
    docs: list[LinkEntry] = field(default_factory=list)

    @property
    def published(self) -> bool:
        """Whether the dataset has been published."""
        return self.status == DatasetStatus.PUBLISHED


@dataclass(frozen=True)
class FieldError:
    """Single failing field of a step submission."""

    field: str
    message_kind: MessageKind


@dataclass(frozen=True)
class Available:
    """Result of an external call that returned a value."""

    value: JsonValue


@dataclass(frozen=True)
class Unavailable:
    """Result of an external call that failed and was reported."""

    reason: str
    context: dict[str, JsonValue] = field(default_factory=dict)


ExternalResult = Available | Unavailable

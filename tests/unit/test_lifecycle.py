"""Unit tests for the dataset lifecycle."""

from datetime import datetime, timezone

import pytest

from dataset_publisher.application.services.lifecycle import (
    ensure_publishable,
    lifecycle_state,
    mark_published,
    missing_requirements,
)
from dataset_publisher.domain.entities import Dataset, LinkEntry
from dataset_publisher.domain.enums import DatasetStatus, Frequency, LifecycleState, LinkKind
from dataset_publisher.domain.errors import (
    DatasetAlreadyPublishedError,
    DatasetNotPublishableError,
    WorkflowError,
)

CREATED_AT = datetime(2025, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def complete_dataset():
    """Create a dataset meeting every publication requirement."""
    return Dataset(
        id="1",
        uuid="0b0e7e5a-5d1f-4d0b-9a53-1b6f4b3e9c11",
        organisation_id="land-registry",
        creator_id="user-1",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
        title="my test dataset",
        summary="summary",
        description="description",
        topic_id="7",
        licence_code="uk-ogl",
        frequency=Frequency.NEVER,
        links=[LinkEntry(id="l1", kind=LinkKind.DATA, url="https://localhost", name="file")],
    )


def test_complete_draft(complete_dataset):
    """Test a complete draft is ready to publish."""
    assert missing_requirements(complete_dataset) == []
    assert lifecycle_state(complete_dataset) == LifecycleState.DRAFT_COMPLETE
    ensure_publishable(complete_dataset)


@pytest.mark.parametrize(
    "field,value",
    [
        ("title", None),
        ("summary", "  "),
        ("description", None),
        ("topic_id", None),
        ("licence_code", None),
        ("frequency", None),
        ("links", []),
    ],
)
def test_each_requirement_blocks_publication(complete_dataset, field, value):
    """Test every missing requirement keeps the dataset in draft."""
    setattr(complete_dataset, field, value)

    assert missing_requirements(complete_dataset) == [field]
    assert lifecycle_state(complete_dataset) == LifecycleState.DRAFT_INCOMPLETE
    with pytest.raises(DatasetNotPublishableError) as excinfo:
        mark_published(complete_dataset, CREATED_AT)

    assert excinfo.value.missing == [field]
    assert complete_dataset.status == DatasetStatus.DRAFT


def test_docs_do_not_count_as_links(complete_dataset):
    """Test supporting documents do not satisfy the link requirement."""
    complete_dataset.docs = complete_dataset.links
    complete_dataset.links = []

    assert missing_requirements(complete_dataset) == ["links"]


def test_mark_published(complete_dataset):
    """Test publishing flips status once."""
    published_at = datetime(2025, 2, 1, tzinfo=timezone.utc)

    mark_published(complete_dataset, published_at)

    assert complete_dataset.status == DatasetStatus.PUBLISHED
    assert complete_dataset.published_at == published_at
    assert lifecycle_state(complete_dataset) == LifecycleState.PUBLISHED

    with pytest.raises(DatasetAlreadyPublishedError):
        mark_published(complete_dataset, datetime(2025, 3, 1, tzinfo=timezone.utc))
    assert complete_dataset.published_at == published_at


def test_guard_errors_are_workflow_errors():
    """Test guard failures are structural errors, not field errors."""
    assert issubclass(DatasetNotPublishableError, WorkflowError)
    assert issubclass(DatasetAlreadyPublishedError, WorkflowError)


def test_empty_draft_lists_all_requirements():
    """Test a fresh draft reports every requirement in order."""
    dataset = Dataset(
        id="2",
        uuid="u",
        organisation_id="o",
        creator_id="c",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )

    assert missing_requirements(dataset) == [
        "title",
        "summary",
        "description",
        "topic_id",
        "licence_code",
        "frequency",
        "links",
    ]

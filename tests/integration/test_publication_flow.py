"""Integration tests for the publication wizard end to end."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from dataset_publisher.domain.enums import DatasetStatus, LifecycleState, StepId
from dataset_publisher.domain.ports import ObservabilitySinkPort
from dataset_publisher.infrastructure.config.settings import Settings
from dataset_publisher.infrastructure.runtime.bootstrap import build_wizard
from dataset_publisher.infrastructure.storage.memory import InMemoryTopicCatalog
from dataset_publisher.interfaces.forms.step_form import parse_step_form


@pytest.fixture
def wizard():
    """Create wizard with in-memory storage and no external catalog."""
    return build_wizard(
        Settings(_env_file=None),
        sink=MagicMock(spec=ObservabilitySinkPort),
        topics=InMemoryTopicCatalog({"1": "Government", "2": "Transport"}),
    )


async def _describe(wizard, dataset_id, frequency):
    steps = [
        (StepId.NEW, {"title": "my test dataset", "summary": "summary", "description": "description"}),
        (StepId.TOPIC, {"topic_id": "1"}),
        (StepId.LICENCE, {"licence_code": "uk-ogl"}),
        (StepId.LOCATION, {"location1": "Aviation House"}),
        (StepId.FREQUENCY, {"frequency": frequency}),
    ]
    outcome = None
    for step, step_input in steps:
        outcome = await wizard.advance(dataset_id, step, step_input)
        assert outcome.succeeded, (step, outcome.errors)
    return outcome


@pytest.mark.asyncio
async def test_daily_dataset_is_published(wizard):
    """Test a daily dataset from first step to publication."""
    draft = await wizard.start_draft("user-1", "land-registry")

    outcome = await _describe(wizard, draft.id, "daily")
    assert outcome.next_step == StepId.DATAFILES

    params = {
        "datafile[url]": "https://localhost",
        "datafile[name]": "my test datafile",
        "datafile[day]": "15",
        "datafile[month]": "1",
        "datafile[year]": "2020",
    }
    outcome = await wizard.advance(draft.id, StepId.DATAFILES, parse_step_form(StepId.DATAFILES, params))
    assert outcome.next_step == StepId.DOCS

    preview = await wizard.preview(draft.id)
    assert preview.state == LifecycleState.DRAFT_COMPLETE
    assert preview.link_names == ["my test datafile"]

    result = await wizard.publish(draft.id)
    assert result.published is True

    stored = await wizard.repository.get(draft.id)
    assert stored.status == DatasetStatus.PUBLISHED
    assert stored.name == "my-test-dataset"
    assert stored.links[0].end_date == date(2020, 1, 15)


@pytest.mark.asyncio
async def test_one_off_dataset_with_docs(wizard):
    """Test a one-off dataset goes through undated links and docs."""
    draft = await wizard.start_draft("user-1", "land-registry")

    outcome = await _describe(wizard, draft.id, "never")
    assert outcome.next_step == StepId.DATAFILES_UNDATED

    outcome = await wizard.advance(
        draft.id,
        StepId.DATAFILES_UNDATED,
        {"url": "https://localhost", "name": "my test datafile"},
    )
    assert outcome.next_step == StepId.DOCS

    outcome = await wizard.advance(draft.id, StepId.DOCS, {"url": "https://localhost/doc", "name": "my test doc"})
    assert outcome.next_step == StepId.PUBLISH

    result = await wizard.publish(draft.id)
    assert result.published is True

    stored = await wizard.repository.get(draft.id)
    assert stored.links[0].end_date is None
    assert [doc.name for doc in stored.docs] == ["my test doc"]


@pytest.mark.asyncio
async def test_publish_is_guarded(wizard):
    """Test a dataset without links cannot be published, and only once."""
    draft = await wizard.start_draft("user-1", "land-registry")
    await _describe(wizard, draft.id, "annually")

    refused = await wizard.publish(draft.id)
    assert refused.published is False
    assert refused.missing == ["links"]

    await wizard.advance(draft.id, StepId.DATAFILES, {"url": "https://localhost", "name": "f", "year": "2020"})
    assert (await wizard.publish(draft.id)).published is True

    again = await wizard.publish(draft.id)
    assert again.published is False
    assert again.status == DatasetStatus.PUBLISHED


@pytest.mark.asyncio
async def test_errors_are_shown_twice(wizard):
    """Test each failing field appears inline and in the summary."""
    draft = await wizard.start_draft("user-1", "land-registry")

    outcome = await wizard.advance(draft.id, StepId.NEW, {"title": "", "summary": "", "description": ""})

    messages = outcome.rendered_errors.all_messages()
    assert messages.count("Please enter a valid title") == 2
    assert messages.count("Please provide a summary") == 2
    assert outcome.rendered_errors.heading == "There was a problem"


@pytest.mark.asyncio
async def test_bad_date_is_rejected(wizard):
    """Test invalid period fields for a monthly dataset."""
    draft = await wizard.start_draft("user-1", "land-registry")
    await _describe(wizard, draft.id, "monthly")

    outcome = await wizard.advance(
        draft.id,
        StepId.DATAFILES,
        {"url": "https://localhost", "name": "my test datafile", "month": "13", "year": "20"},
    )

    messages = outcome.rendered_errors.all_messages()
    assert messages.count("Please enter a valid month") == 2
    assert messages.count("Please enter a valid year") == 2
    assert (await wizard.repository.get(draft.id)).links == []

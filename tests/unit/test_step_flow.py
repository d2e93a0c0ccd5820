"""Unit tests for step sequencing."""

import pytest

from dataset_publisher.application.services.step_flow import (
    FREQUENCY_ROUTES,
    STEP_SEQUENCE,
    datafiles_step,
    first_step,
    next_step,
    parse_step,
)
from dataset_publisher.domain.enums import Frequency, StepId
from dataset_publisher.domain.errors import FrequencyNotSetError, InvalidStepError


def test_sequence_order():
    """Test the fixed step order."""
    assert [step.value for step in STEP_SEQUENCE] == [
        "new",
        "topic",
        "licence",
        "location",
        "frequency",
        "datafiles",
        "docs",
        "publish",
    ]
    assert first_step() == StepId.NEW


def test_every_frequency_is_routed():
    """Test the frequency branch covers every frequency."""
    assert set(FREQUENCY_ROUTES) == set(Frequency)


def test_never_routes_to_undated_links():
    """Test one-off datasets skip the period fields."""
    assert next_step(StepId.FREQUENCY, Frequency.NEVER) == StepId.DATAFILES_UNDATED


@pytest.mark.parametrize("frequency", [f for f in Frequency if f != Frequency.NEVER])
def test_dated_frequencies_route_to_datafiles(frequency):
    """Test every other frequency shares the dated link step."""
    assert next_step(StepId.FREQUENCY, frequency) == StepId.DATAFILES
    assert datafiles_step(frequency.value) == StepId.DATAFILES


@pytest.mark.parametrize(
    "step,expected",
    [
        (StepId.NEW, StepId.TOPIC),
        (StepId.TOPIC, StepId.LICENCE),
        (StepId.LICENCE, StepId.LOCATION),
        (StepId.LOCATION, StepId.FREQUENCY),
        (StepId.DATAFILES, StepId.DOCS),
        (StepId.DATAFILES_UNDATED, StepId.DOCS),
        (StepId.DOCS, StepId.PUBLISH),
    ],
)
def test_linear_steps(step, expected):
    """Test steps outside the branch follow the fixed order."""
    assert next_step(step, Frequency.DAILY) == expected
    assert next_step(step, None) == expected


def test_frequency_step_needs_frequency():
    """Test branching requires a frequency."""
    with pytest.raises(FrequencyNotSetError):
        next_step(StepId.FREQUENCY, None)


def test_nothing_follows_publish():
    """Test publish is the last step."""
    with pytest.raises(InvalidStepError):
        next_step(StepId.PUBLISH, Frequency.DAILY)


def test_parse_step():
    """Test step names map to step ids and unknown names are rejected."""
    assert parse_step("datafiles-undated") == StepId.DATAFILES_UNDATED
    assert parse_step(StepId.DOCS) == StepId.DOCS
    with pytest.raises(InvalidStepError, match="Unknown step 'summary'"):
        parse_step("summary")

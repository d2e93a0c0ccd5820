"""Advance a dataset through one wizard step - main orchestration."""

import re
import uuid
from dataclasses import replace
from typing import Callable

import structlog

from dataset_publisher.application.dto.wizard import StepOutcome
from dataset_publisher.application.services.coverage import compute_end_date
from dataset_publisher.application.services.messages import render_errors
from dataset_publisher.application.services.step_flow import next_step, parse_step
from dataset_publisher.application.services.validation import (
    PERIOD_RULES,
    ValidationContext,
    validate_period,
    validate_step,
)
from dataset_publisher.application.use_cases.sync_metadata import run as sync_metadata
from dataset_publisher.domain.entities import Dataset, LinkEntry
from dataset_publisher.domain.enums import Frequency, LinkKind, StepId
from dataset_publisher.domain.ports import (
    ClockPort,
    DatasetRepositoryPort,
    MetadataSyncPort,
    ObservabilitySinkPort,
    TopicCatalogPort,
)
from dataset_publisher.domain.types import StepInput

logger = structlog.get_logger()

PERIOD_FIELDS = ("day", "month", "quarter", "year")


async def run(
    dataset_id: str,
    step: StepId,
    step_input: StepInput,
    repository: DatasetRepositoryPort,
    topics: TopicCatalogPort,
    metadata_sync: MetadataSyncPort,
    sink: ObservabilitySinkPort,
    clock: ClockPort,
) -> StepOutcome:
    """Validate and apply one step submission.

    Invalid submissions come back as field errors and leave the stored
    dataset untouched. Valid ones are applied, stored, pushed to the external
    catalog on a best-effort basis, and answered with the next step.
    """
    step = parse_step(step)
    dataset = await repository.get(dataset_id)

    context = ValidationContext(
        frequency=dataset.frequency,
        topic_ids=await topics.topic_ids() if step == StepId.TOPIC else frozenset(),
    )
    report = validate_step(step, step_input, context)

    if not report.is_valid:
        logger.info(
            "step_rejected",
            dataset_id=dataset_id,
            step=step.value,
            fields=[error.field for error in report.errors],
        )
        return StepOutcome(
            dataset_id=dataset_id,
            step=step,
            errors=report.errors,
            rendered_errors=render_errors(report.errors),
        )

    _STEP_APPLIERS[step](dataset, report.cleaned)
    dataset.updated_at = clock.now()
    await repository.save(dataset)

    following = next_step(step, dataset.frequency)
    logger.info(
        "step_advanced",
        dataset_id=dataset_id,
        step=step.value,
        next_step=following.value,
    )

    await sync_metadata(dataset, metadata_sync, sink)

    return StepOutcome(dataset_id=dataset_id, step=step, next_step=following)


# ============================================================================
# Step Appliers
# ============================================================================


def _apply_new(dataset: Dataset, cleaned: StepInput) -> None:
    dataset.title = cleaned["title"]
    dataset.summary = cleaned["summary"]
    dataset.description = cleaned["description"]
    dataset.name = slugify(dataset.title)


def _apply_topic(dataset: Dataset, cleaned: StepInput) -> None:
    dataset.topic_id = cleaned["topic_id"]


def _apply_licence(dataset: Dataset, cleaned: StepInput) -> None:
    dataset.licence_code = cleaned["licence_code"]


def _apply_location(dataset: Dataset, cleaned: StepInput) -> None:
    dataset.location1 = cleaned["location1"]
    dataset.location2 = cleaned["location2"]
    dataset.location3 = cleaned["location3"]


def _apply_frequency(dataset: Dataset, cleaned: StepInput) -> None:
    previous = dataset.frequency
    dataset.frequency = cleaned["frequency"]

    if previous is not None and previous != dataset.frequency and dataset.links:
        _reconcile_links(dataset)


def _apply_datafile(dataset: Dataset, cleaned: StepInput) -> None:
    link = _build_link(LinkKind.DATA, cleaned, dataset.frequency)
    dataset.links = _upsert(dataset.links, link)


def _apply_doc(dataset: Dataset, cleaned: StepInput) -> None:
    doc = _build_link(LinkKind.DOC, cleaned, None)
    dataset.docs = _upsert(dataset.docs, doc)


_STEP_APPLIERS: dict[StepId, Callable[[Dataset, StepInput], None]] = {
    StepId.NEW: _apply_new,
    StepId.TOPIC: _apply_topic,
    StepId.LICENCE: _apply_licence,
    StepId.LOCATION: _apply_location,
    StepId.FREQUENCY: _apply_frequency,
    StepId.DATAFILES: _apply_datafile,
    StepId.DATAFILES_UNDATED: _apply_datafile,
    StepId.DOCS: _apply_doc,
}


# ============================================================================
# Link Entries
# ============================================================================


def _period_fields(frequency: Frequency | None, values: StepInput) -> dict[str, int | None]:
    """Keep only the period fields meaningful for the frequency."""
    meaningful = {rule.field for rule in PERIOD_RULES[frequency]} if frequency else set()
    return {name: values.get(name) if name in meaningful else None for name in PERIOD_FIELDS}


def _build_link(kind: LinkKind, cleaned: StepInput, frequency: Frequency | None) -> LinkEntry:
    period = _period_fields(frequency, cleaned) if kind == LinkKind.DATA else {}
    end_date = compute_end_date(frequency, **period) if kind == LinkKind.DATA else None

    return LinkEntry(
        id=str(uuid.uuid4()),
        kind=kind,
        url=cleaned["url"],
        name=cleaned["name"],
        end_date=end_date,
        **period,
    )


def _upsert(entries: list[LinkEntry], entry: LinkEntry) -> list[LinkEntry]:
    """Replace the entry for the same named URL, or append a new one."""
    for index, existing in enumerate(entries):
        if existing.same_target(entry):
            updated = list(entries)
            updated[index] = replace(entry, id=existing.id)
            return updated
    return [*entries, entry]


def _reconcile_links(dataset: Dataset) -> None:
    """Re-derive data link periods after the frequency changed.

    Links whose stored period fields satisfy the new frequency keep them and
    get a new end date; the others are dropped and have to be added again.
    """
    kept = []
    for link in dataset.links:
        raw = {name: getattr(link, name) for name in PERIOD_FIELDS}
        report = validate_period(dataset.frequency, raw)
        if not report.is_valid:
            logger.info(
                "link_dropped_after_frequency_change",
                dataset_id=dataset.id,
                link_id=link.id,
                frequency=dataset.frequency.value,
            )
            continue

        period = _period_fields(dataset.frequency, report.cleaned)
        kept.append(
            replace(
                link,
                end_date=compute_end_date(dataset.frequency, **period),
                **period,
            )
        )
    dataset.links = kept


def slugify(title: str) -> str:
    """URL-safe name derived from a title."""
    return re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")

"""Dataset publication wizard adapter."""

from collections.abc import Mapping

import structlog

from dataset_publisher.application.dto.wizard import (
    PublishOutcome,
    PublishPreview,
    StepOutcome,
)
from dataset_publisher.application.services.step_flow import parse_step
from dataset_publisher.application.use_cases.advance_step import run as advance_step
from dataset_publisher.application.use_cases.preview_dataset import run as preview_dataset
from dataset_publisher.application.use_cases.publish_dataset import run as publish_dataset
from dataset_publisher.application.use_cases.start_draft import run as start_draft
from dataset_publisher.domain.entities import Dataset
from dataset_publisher.domain.enums import DatasetStatus, StepId
from dataset_publisher.domain.errors import (
    DatasetNotPublishableError,
    InvalidStepError,
    WorkflowError,
)
from dataset_publisher.domain.ports import (
    ClockPort,
    DatasetRepositoryPort,
    MetadataSyncPort,
    ObservabilitySinkPort,
    TopicCatalogPort,
)
from dataset_publisher.domain.types import StepInput
from dataset_publisher.infrastructure.observability.metrics import (
    datasets_published,
    datasets_started,
    steps_advanced,
    steps_rejected,
    workflow_errors,
)
from dataset_publisher.interfaces.forms.step_form import parse_step_form

logger = structlog.get_logger()


class DatasetWizard:
    """Entry point for the publication wizard.

    Holds no per-dataset state between calls; every operation works on the
    stored dataset.
    """

    def __init__(
        self,
        repository: DatasetRepositoryPort,
        topics: TopicCatalogPort,
        metadata_sync: MetadataSyncPort,
        sink: ObservabilitySinkPort,
        clock: ClockPort,
    ) -> None:
        """Initialize wizard."""
        self.repository = repository
        self.topics = topics
        self.metadata_sync = metadata_sync
        self.sink = sink
        self.clock = clock

    async def start_draft(self, creator_id: str, organisation_id: str) -> Dataset:
        """Create a new draft dataset."""
        dataset = await start_draft(creator_id, organisation_id, self.repository, self.clock)
        datasets_started.inc()
        return dataset

    async def advance(self, dataset_id: str, step: StepId | str, step_input: StepInput) -> StepOutcome:
        """Submit one wizard step."""
        try:
            step = parse_step(step)
            outcome = await advance_step(
                dataset_id,
                step,
                step_input,
                self.repository,
                self.topics,
                self.metadata_sync,
                self.sink,
                self.clock,
            )
        except WorkflowError as e:
            workflow_errors.labels(operation="advance").inc()
            logger.warning("step_workflow_error", dataset_id=dataset_id, step=step, error=str(e))
            return StepOutcome(dataset_id=dataset_id, step=step, workflow_error=str(e))

        if outcome.succeeded:
            steps_advanced.labels(step=step.value).inc()
        else:
            steps_rejected.labels(step=step.value).inc()
        return outcome

    async def submit_form(self, dataset_id: str, step: StepId | str, params: Mapping[str, str]) -> StepOutcome:
        """Submit one wizard step from raw ``scope[field]`` form parameters."""
        try:
            step_input = parse_step_form(step, params)
        except InvalidStepError:
            # Unknown steps are reported by advance
            step_input = {}
        return await self.advance(dataset_id, step, step_input)

    async def publish(self, dataset_id: str) -> PublishOutcome:
        """Publish a dataset if it is complete."""
        try:
            dataset = await publish_dataset(
                dataset_id,
                self.repository,
                self.metadata_sync,
                self.sink,
                self.clock,
            )
        except WorkflowError as e:
            workflow_errors.labels(operation="publish").inc()
            logger.warning("publish_rejected", dataset_id=dataset_id, error=str(e))
            stored = await self.repository.get(dataset_id)
            return PublishOutcome(
                dataset_id=dataset_id,
                published=False,
                status=stored.status,
                workflow_error=str(e),
                missing=e.missing if isinstance(e, DatasetNotPublishableError) else [],
            )

        datasets_published.inc()
        return PublishOutcome(dataset_id=dataset.id, published=True, status=DatasetStatus.PUBLISHED)

    async def preview(self, dataset_id: str) -> PublishPreview:
        """Summary of a dataset before publishing."""
        return await preview_dataset(dataset_id, self.repository, self.topics)

"""Wizard DTOs."""

from pydantic import BaseModel, Field

from dataset_publisher.domain.entities import FieldError
from dataset_publisher.domain.enums import DatasetStatus, LifecycleState, StepId


class InlineMessage(BaseModel):
    """Message attached to a form field."""

    field: str
    text: str


class RenderedErrors(BaseModel):
    """Field errors as shown on a step page.

    Every failing field is rendered twice with identical text: once inline
    next to the field and once in the page summary.
    """

    heading: str
    summary: list[str]
    inline: list[InlineMessage]

    def all_messages(self) -> list[str]:
        """All message texts on the page, inline copies first."""
        return [message.text for message in self.inline] + list(self.summary)

    def for_field(self, field: str) -> list[str]:
        """Inline messages for a field."""
        return [message.text for message in self.inline if message.field == field]


class StepOutcome(BaseModel):
    """Result of submitting a wizard step."""

    dataset_id: str
    step: StepId | str
    next_step: StepId | None = None
    errors: list[FieldError] = Field(default_factory=list)
    rendered_errors: RenderedErrors | None = None
    workflow_error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the submission was accepted."""
        return self.next_step is not None


class PublishOutcome(BaseModel):
    """Result of the publish operation."""

    dataset_id: str
    published: bool
    status: DatasetStatus
    workflow_error: str | None = None
    missing: list[str] = Field(default_factory=list)


class PublishPreview(BaseModel):
    """Summary of a dataset shown before publishing."""

    dataset_id: str
    uuid: str
    status: DatasetStatus
    state: LifecycleState
    missing: list[str]
    organisation_id: str
    title: str | None = None
    summary: str | None = None
    description: str | None = None
    topic_title: str | None = None
    licence_title: str | None = None
    locations: list[str] = Field(default_factory=list)
    frequency_label: str | None = None
    link_names: list[str] = Field(default_factory=list)
    doc_names: list[str] = Field(default_factory=list)

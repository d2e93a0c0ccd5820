"""Domain errors."""


class DomainError(Exception):
    """Base domain error."""


class DatasetNotFoundError(DomainError):
    """Dataset does not exist in storage."""


class StorageError(DomainError):
    """Dataset storage could not be read or written."""


class UnknownEndpointError(DomainError):
    """No legacy endpoint is registered for a resource/action pair."""


class WorkflowError(DomainError):
    """Structural wizard error, not tied to a single form field."""


class InvalidStepError(WorkflowError):
    """Step cannot be submitted through the step operation."""


class FrequencyNotSetError(WorkflowError):
    """Data links submitted before the dataset frequency was chosen."""


class DatasetAlreadyPublishedError(WorkflowError):
    """Dataset has already been published."""


class DatasetNotPublishableError(WorkflowError):
    """Dataset does not meet the publication requirements."""

    def __init__(self, missing: list[str]) -> None:
        """Initialize with the unmet requirements."""
        self.missing = list(missing)
        super().__init__(f"Dataset is not ready to publish, missing: {', '.join(self.missing)}")

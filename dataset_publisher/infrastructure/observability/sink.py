"""Failure reporting for external collaborators."""

import sentry_sdk
import structlog

from dataset_publisher.domain.ports import ObservabilitySinkPort
from dataset_publisher.domain.types import JsonValue
from dataset_publisher.infrastructure.observability.metrics import external_failures

logger = structlog.get_logger()


class SentryObservabilitySink(ObservabilitySinkPort):
    """Reports failures to Sentry, the log and the failure counter.

    Sentry calls are no-ops until ``sentry_sdk.init`` has been called with a DSN.
    """

    def report_failure(
        self,
        collaborator: str,
        message: str,
        context: dict[str, JsonValue],
    ) -> None:
        """Report a failed external call."""
        external_failures.labels(collaborator=collaborator).inc()
        logger.error("external_call_failed", collaborator=collaborator, message=message, **context)

        sentry_sdk.capture_message(
            message,
            level="error",
            tags={"collaborator": collaborator},
            extras=context,
        )

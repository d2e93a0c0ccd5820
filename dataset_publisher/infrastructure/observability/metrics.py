"""Prometheus metrics."""

from prometheus_client import Counter

steps_advanced = Counter(
    "wizard_steps_advanced_total",
    "Total number of wizard steps accepted",
    ["step"],
)

steps_rejected = Counter(
    "wizard_steps_rejected_total",
    "Total number of wizard step submissions with field errors",
    ["step"],
)

workflow_errors = Counter(
    "wizard_workflow_errors_total",
    "Total number of structural wizard errors",
    ["operation"],
)

datasets_started = Counter(
    "datasets_started_total",
    "Total number of dataset drafts started",
)

datasets_published = Counter(
    "datasets_published_total",
    "Total number of datasets published",
)

external_failures = Counter(
    "external_call_failures_total",
    "Total number of failed calls to external collaborators",
    ["collaborator"],
)

"""Best-effort metadata sync to a CKAN catalog."""

import asyncio

import requests
import structlog

from dataset_publisher.domain.entities import (
    Available,
    Dataset,
    ExternalResult,
    LinkEntry,
    Unavailable,
)
from dataset_publisher.domain.enums import DatasetStatus, LinkKind
from dataset_publisher.domain.ports import MetadataSyncPort, ObservabilitySinkPort
from dataset_publisher.domain.types import JsonValue

logger = structlog.get_logger()

PACKAGE_PATCH_PATH = "/api/3/action/package_patch"


def _resource(link: LinkEntry) -> dict[str, JsonValue]:
    resource = {
        "id": link.id,
        "url": link.url,
        "name": link.name,
        "resource_type": "data" if link.kind == LinkKind.DATA else "documentation",
    }
    if link.end_date is not None:
        resource["end_date"] = link.end_date.isoformat()
    return resource


def build_package_patch(dataset: Dataset) -> dict[str, JsonValue]:
    """Package fields currently known for a dataset.

    Unset fields are left out so the patch never clears catalog values.
    """
    package = {
        "id": dataset.uuid,
        "name": dataset.name or None,
        "title": dataset.title,
        "notes": dataset.description,
        "license_id": dataset.licence_code,
        "owner_org": dataset.organisation_id,
        "private": dataset.status != DatasetStatus.PUBLISHED,
    }
    extras = {
        "summary": dataset.summary,
        "theme-primary": dataset.topic_id,
        "update_frequency": dataset.frequency.value if dataset.frequency else None,
        "geographic_coverage": ", ".join(
            location
            for location in (dataset.location1, dataset.location2, dataset.location3)
            if location
        )
        or None,
    }

    patch = {key: value for key, value in package.items() if value is not None}
    patch["extras"] = [
        {"key": key, "value": value} for key, value in extras.items() if value is not None
    ]
    resources = [_resource(link) for link in [*dataset.links, *dataset.docs]]
    if resources:
        patch["resources"] = resources
    return patch


class CkanMetadataSync(MetadataSyncPort):
    """Pushes dataset metadata with a single package_patch call.

    Failures are reported to the observability sink and returned as
    Unavailable. There is no retry.
    """

    def __init__(
        self,
        ckan_url: str,
        api_key: str | None,
        sink: ObservabilitySinkPort,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize sync adapter."""
        self.url = ckan_url.rstrip("/") + PACKAGE_PATCH_PATH
        self.api_key = api_key
        self.sink = sink
        self.timeout_seconds = timeout_seconds

    def _headers(self) -> dict[str, str]:
        return {"Authorization": self.api_key} if self.api_key else {}

    async def sync(self, dataset: Dataset) -> ExternalResult:
        """Push known dataset fields to the catalog."""
        try:
            response = await asyncio.to_thread(
                requests.post,
                self.url,
                json=build_package_patch(dataset),
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            body = response.json() if response.content else {}
        except (requests.RequestException, ValueError) as e:
            context = {"url": self.url, "dataset_id": dataset.id, "uuid": dataset.uuid, "error": str(e)}
            self.sink.report_failure(
                "metadata_sync",
                f"Failed to make the request to {self.url}",
                context,
            )
            return Unavailable(reason=str(e), context=context)

        logger.info("metadata_synced", dataset_id=dataset.id, uuid=dataset.uuid, url=self.url)
        return Available(body.get("result") if isinstance(body, dict) else body)


class NullMetadataSync(MetadataSyncPort):
    """Metadata sync used when no external catalog is configured."""

    async def sync(self, dataset: Dataset) -> ExternalResult:
        """Skip the sync."""
        return Available(None)

"""Client for the legacy internal API."""

import asyncio
from dataclasses import dataclass

import requests
import structlog

from dataset_publisher.domain.entities import Available, ExternalResult, Unavailable
from dataset_publisher.domain.errors import UnknownEndpointError
from dataset_publisher.domain.ports import ObservabilitySinkPort

logger = structlog.get_logger()

ENDPOINTS: dict[str, dict[str, str]] = {
    "datasets": {
        "index": "/api/3/action/package_list",
        "search": "/api/3/action/package_search",
    },
    "organisations": {
        "index": "/api/3/action/organization_list",
    },
    "topics": {
        "index": "/api/3/action/group_list",
    },
    "users": {
        "index": "/api/3/action/user_list",
    },
}


@dataclass(frozen=True)
class LegacyServerConfig:
    """Connection settings for the legacy API."""

    host: str
    api_key: str
    timeout_seconds: float = 10.0


class LegacyServer:
    """Read-only legacy API client.

    Requests are authenticated with the API key; transport, HTTP and decoding
    failures are reported to the sink and come back as Unavailable.
    """

    def __init__(self, config: LegacyServerConfig, sink: ObservabilitySinkPort) -> None:
        """Initialize client."""
        self.config = config
        self.sink = sink

    def url_for(self, resource_name: str, action: str) -> str:
        """URL of a registered resource action."""
        try:
            path = ENDPOINTS[resource_name][action]
        except KeyError as e:
            raise UnknownEndpointError(f"No legacy endpoint for {resource_name}.{action}") from e
        return self.config.host.rstrip("/") + path

    def _headers(self) -> dict[str, str]:
        return {"Authorization": self.config.api_key}

    async def get(self, resource_name: str, action: str) -> ExternalResult:
        """GET a resource action and parse the JSON body."""
        url = self.url_for(resource_name, action)
        try:
            response = await asyncio.to_thread(
                requests.get,
                url,
                headers=self._headers(),
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            context = {"url": url, "resource_name": resource_name, "action": action, "error": str(e)}
            self.sink.report_failure("legacy_server", f"Failed to make the request to {url}", context)
            return Unavailable(reason=str(e), context=context)

        logger.info("legacy_request_succeeded", url=url, resource_name=resource_name, action=action)
        return Available(body)

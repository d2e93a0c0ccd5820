"""Best-effort metadata sync to the external catalog."""

import structlog

from dataset_publisher.domain.entities import Dataset, ExternalResult, Unavailable
from dataset_publisher.domain.ports import MetadataSyncPort, ObservabilitySinkPort

logger = structlog.get_logger()


async def run(
    dataset: Dataset,
    metadata_sync: MetadataSyncPort,
    sink: ObservabilitySinkPort,
) -> ExternalResult:
    """Push dataset metadata once; never raises into the wizard."""
    try:
        result = await metadata_sync.sync(dataset)
    except Exception as e:
        logger.error("metadata_sync_crashed", dataset_id=dataset.id, exc_info=True)
        context = {"dataset_id": dataset.id, "uuid": dataset.uuid, "error": str(e)}
        sink.report_failure("metadata_sync", "Metadata sync raised unexpectedly", context)
        return Unavailable(reason=str(e), context=context)

    if isinstance(result, Unavailable):
        logger.warning("metadata_sync_unavailable", dataset_id=dataset.id, reason=result.reason)
    return result

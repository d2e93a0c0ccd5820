"""Clock implementation."""

from datetime import datetime, timezone

from dataset_publisher.domain.ports import ClockPort
from dataset_publisher.domain.types import Timestamp


class SystemClock(ClockPort):
    """System clock implementation."""

    def now(self) -> Timestamp:
        """Get current timestamp."""
        return datetime.now(timezone.utc)

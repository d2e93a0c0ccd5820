"""Unit tests for clock."""

from datetime import datetime, timezone

from dataset_publisher.infrastructure.runtime.clock import SystemClock


def test_now():
    """Test getting current time."""
    clock = SystemClock()
    now = clock.now()

    assert isinstance(now, datetime)
    assert now.tzinfo == timezone.utc

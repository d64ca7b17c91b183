"""Unit tests for the monotonic timestamp source."""

from unittest.mock import patch

from risk_ledger.infrastructure.clock import MonotonicClock


class TestMonotonicClock:
    """Tests for MonotonicClock."""

    def test_returns_epoch_seconds(self):
        with patch("risk_ledger.infrastructure.clock.monotonic.time.time", return_value=1_700_000_000.7):
            assert MonotonicClock().now() == 1_700_000_000

    def test_same_second_still_increases(self):
        clock = MonotonicClock()
        with patch("risk_ledger.infrastructure.clock.monotonic.time.time", return_value=1_700_000_000.0):
            readings = [clock.now() for _ in range(3)]

        assert readings == [1_700_000_000, 1_700_000_001, 1_700_000_002]

    def test_wall_clock_stepping_back(self):
        clock = MonotonicClock()
        with patch("risk_ledger.infrastructure.clock.monotonic.time.time", return_value=2_000.0):
            first = clock.now()
        with patch("risk_ledger.infrastructure.clock.monotonic.time.time", return_value=1_000.0):
            second = clock.now()

        assert second == first + 1

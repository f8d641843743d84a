"""
Tests for Detection Results, History and Session Counters
"""

import pytest

from ids_monitor.monitoring.history import (
    HISTORY_SIZE,
    DetectionHistory,
    DetectionResult,
    build_detail,
    is_high_threat,
)
from ids_monitor.monitoring.session import SessionStats, threat_distribution


def _result(i, threat=0.5):
    return DetectionResult(timestamp=i, threat=threat, details=f"r{i}")


class TestBuildDetail:
    """Tests for detail string construction."""

    def test_anomalous(self):
        assert build_detail("192.168.10.20", True) == "Anomalous traffic detected from 192.168.10.20"

    def test_normal(self):
        assert build_detail("192.168.10.20", False) == "Normal traffic pattern from 192.168.10.20"


class TestDetectionHistory:
    """Tests for DetectionHistory."""

    def test_default_size(self):
        """Test the default window holds 51 results."""
        assert DetectionHistory().maxlen == HISTORY_SIZE == 51

    def test_bounded_after_overflow(self):
        """Test only the 51 most recent results remain, in order."""
        history = DetectionHistory()
        for i in range(60):
            history.append(_result(i))
        assert len(history) == 51
        assert [r.timestamp for r in history] == list(range(9, 60))

    def test_under_capacity_keeps_all(self):
        """Test nothing is evicted below capacity."""
        history = DetectionHistory()
        for i in range(10):
            history.append(_result(i))
        assert [r.timestamp for r in history.snapshot()] == list(range(10))

    def test_snapshot_is_a_copy(self):
        """Test snapshots do not change after later appends."""
        history = DetectionHistory()
        history.append(_result(0))
        snap = history.snapshot()
        history.append(_result(1))
        assert len(snap) == 1
        assert isinstance(snap, tuple)

    def test_recent_newest_first(self):
        """Test the alert feed order."""
        history = DetectionHistory()
        for i in range(8):
            history.append(_result(i))
        assert [r.timestamp for r in history.recent(5)] == [7, 6, 5, 4, 3]
        assert history.recent(0) == ()

    def test_to_dataframe(self):
        """Test DataFrame export columns and rows."""
        history = DetectionHistory()
        history.append(_result(1, 0.25))
        history.append(_result(2, 0.75))
        df = history.to_dataframe()
        assert list(df.columns) == ["timestamp", "threat", "details"]
        assert df["threat"].tolist() == [0.25, 0.75]

    def test_empty_dataframe(self):
        """Test an empty history still exports its columns."""
        df = DetectionHistory().to_dataframe()
        assert df.empty
        assert list(df.columns) == ["timestamp", "threat", "details"]

    def test_invalid_size(self):
        """Test non-positive sizes are rejected."""
        with pytest.raises(ValueError):
            DetectionHistory(0)

    def test_high_threat(self):
        """Test the 0.7 highlight rule is strict."""
        assert is_high_threat(_result(0, 0.71))
        assert not is_high_threat(_result(0, 0.7))


class TestSessionStats:
    """Tests for session counters."""

    def test_counters(self):
        """Test counts after a mixed sequence."""
        stats = SessionStats()
        flags = [True, False, False, True, True, False]
        seen = []
        for flag in flags:
            stats.record(flag)
            seen.append((stats.packets_analyzed, stats.active_threats))
        assert stats.packets_analyzed == len(flags)
        assert stats.active_threats == sum(flags)
        # never decreasing
        for (p0, a0), (p1, a1) in zip(seen, seen[1:]):
            assert p1 >= p0 and a1 >= a0

    def test_start_at_zero(self):
        stats = SessionStats()
        assert (stats.packets_analyzed, stats.active_threats) == (0, 0)

    def test_threat_distribution(self):
        """Test severity bands are floored shares."""
        assert threat_distribution(10) == {"Critical": 3, "High": 5, "Medium": 2}
        assert threat_distribution(3) == {"Critical": 0, "High": 1, "Medium": 0}

    def test_summary(self):
        """Test summary aggregates over the retained window."""
        stats = SessionStats()
        history = DetectionHistory()
        for i, threat in enumerate([0.2, 0.4, 0.9]):
            history.append(_result(i, threat))
            stats.record(threat > 0.5)
        summary = stats.summary(history)
        assert summary["packets_analyzed"] == 3
        assert summary["active_threats"] == 1
        assert summary["history_size"] == 3
        assert summary["mean_threat"] == pytest.approx(0.5)
        assert summary["max_threat"] == 0.9

    def test_summary_empty(self):
        summary = SessionStats().summary(DetectionHistory())
        assert summary["mean_threat"] == 0.0
        assert summary["max_threat"] == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

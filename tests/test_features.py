"""
Tests for Feature Extraction
"""

import numpy as np
import pytest

from ids_monitor.data.features import FEATURE_NAMES, NUM_FEATURES, extract_features
from ids_monitor.data.traffic import Packet, Protocol


def _packet(protocol=Protocol.TCP, bytes_transferred=1_000_000, pps=500):
    return Packet(0, "192.168.1.1", "10.0.0.1", protocol, bytes_transferred, pps)


class TestExtractFeatures:
    """Tests for extract_features."""

    def test_shape_and_dtype(self):
        """Test output is a float32 vector of 4 values."""
        x = extract_features(_packet())
        assert x.shape == (NUM_FEATURES,)
        assert x.dtype == np.float32
        assert len(FEATURE_NAMES) == 4

    def test_normalized_values(self):
        """Test bytes and rate are scaled by their maxima."""
        x = extract_features(_packet(bytes_transferred=1_000_000, pps=500))
        assert x[0] == pytest.approx(0.5)
        assert x[1] == pytest.approx(0.25)

    def test_protocol_flag(self):
        """Test TCP maps to 1 and UDP to 0."""
        assert extract_features(_packet(Protocol.TCP))[2] == 1.0
        assert extract_features(_packet(Protocol.UDP))[2] == 0.0

    def test_noise_range(self):
        """Test noise slot is in [0, 1)."""
        rng = np.random.default_rng(0)
        for _ in range(100):
            noise = extract_features(_packet(), rng)[3]
            assert 0.0 <= noise < 1.0

    def test_seeded_noise(self):
        """Test identical noise seeds give identical vectors."""
        a = extract_features(_packet(), np.random.default_rng(5))
        b = extract_features(_packet(), np.random.default_rng(5))
        np.testing.assert_array_equal(a, b)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

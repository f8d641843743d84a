"""
Models Module

Exports:
    - ThreatMLP: The 4 -> 16 -> 8 -> 1 scoring network
    - IntrusionDetectionModel: Async scorer with an explicit init step
    - create_threat_model: Factory function to instantiate the scorer
    - detect_anomaly: Static threshold check
"""

from .threat_model import (
    IntrusionDetectionModel,
    ModelNotInitializedError,
    ThreatMLP,
    ThreatScorer,
    create_threat_model,
)
from .thresholds import BYTE_THRESHOLD, PACKET_THRESHOLD, detect_anomaly

__all__ = [
    "IntrusionDetectionModel",
    "ModelNotInitializedError",
    "ThreatMLP",
    "ThreatScorer",
    "create_threat_model",
    "BYTE_THRESHOLD",
    "PACKET_THRESHOLD",
    "detect_anomaly",
]

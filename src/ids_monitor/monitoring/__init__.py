"""
Monitoring Module

Exports:
    - TrafficMonitor: Periodic generate -> score -> record pipeline
    - MonitorConfig: Interval, history size, thresholds, device, seed
    - DetectionResult / DetectionHistory: Bounded rolling result buffer
    - SessionStats: packets_analyzed / active_threats counters
"""

from .config import MonitorConfig
from .history import (
    HIGH_THREAT_LEVEL,
    HISTORY_SIZE,
    DetectionHistory,
    DetectionResult,
    build_detail,
    is_high_threat,
)
from .session import SessionStats, threat_distribution
from .monitor import TrafficMonitor

__all__ = [
    "MonitorConfig",
    "HIGH_THREAT_LEVEL",
    "HISTORY_SIZE",
    "DetectionHistory",
    "DetectionResult",
    "build_detail",
    "is_high_threat",
    "SessionStats",
    "threat_distribution",
    "TrafficMonitor",
]

"""
Traffic Data Module

This package provides:
1. Synthetic packet generation (no real capture)
2. Packet -> feature vector encoding for the threat model
"""

from .traffic import Packet, Protocol, TrafficGenerator
from .features import FEATURE_NAMES, NUM_FEATURES, extract_features

__all__ = [
    "Packet",
    "Protocol",
    "TrafficGenerator",
    "FEATURE_NAMES",
    "NUM_FEATURES",
    "extract_features",
]

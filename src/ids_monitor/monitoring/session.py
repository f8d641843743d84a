"""
Session counters for a running monitor.

``active_threats`` is a cumulative anomaly count for the session, not a gauge
of currently open incidents. Neither counter is ever decremented or reset.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from .history import DetectionHistory

# Share of flagged packets reported per severity band
SEVERITY_SHARES = {
    "Critical": 0.3,
    "High": 0.5,
    "Medium": 0.2,
}


def threat_distribution(active_threats: int) -> Dict[str, int]:
    return {name: math.floor(active_threats * share) for name, share in SEVERITY_SHARES.items()}


@dataclass
class SessionStats:
    packets_analyzed: int = 0
    active_threats: int = 0

    def record(self, is_anomaly: bool) -> None:
        self.packets_analyzed += 1
        if is_anomaly:
            self.active_threats += 1

    def summary(self, history: DetectionHistory) -> Dict[str, Any]:
        """
        Aggregate view for presentation collaborators.

        Returns:
            dict: counters, history size, mean/max threat over the retained
            window (0.0 when empty) and the severity distribution.
        """
        scores = [r.threat for r in history]
        return {
            "packets_analyzed": self.packets_analyzed,
            "active_threats": self.active_threats,
            "history_size": len(scores),
            "mean_threat": sum(scores) / len(scores) if scores else 0.0,
            "max_threat": max(scores) if scores else 0.0,
            "threat_distribution": threat_distribution(self.active_threats),
        }

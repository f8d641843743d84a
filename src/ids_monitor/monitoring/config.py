"""
Monitor configuration.

Built from the YAML file loaded by ``ids_monitor.utils.load_config``. Every
key is optional; missing ones keep the defaults below.

Example::

    seed: 42
    monitor:
      interval_ms: 2000
      history_size: 51
    thresholds:
      bytes: 1000000
      packets_per_second: 1000
    model:
      device: cpu
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models.thresholds import BYTE_THRESHOLD, PACKET_THRESHOLD
from .history import HISTORY_SIZE

DEFAULT_INTERVAL_MS = 2000


@dataclass
class MonitorConfig:
    interval_ms: int = DEFAULT_INTERVAL_MS
    history_size: int = HISTORY_SIZE
    byte_threshold: int = BYTE_THRESHOLD
    packet_threshold: int = PACKET_THRESHOLD
    device: str = "cpu"
    seed: Optional[int] = None

    def __post_init__(self):
        if self.interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {self.interval_ms}")
        if self.history_size <= 0:
            raise ValueError(f"history_size must be positive, got {self.history_size}")

    @property
    def interval_sec(self) -> float:
        return self.interval_ms / 1000.0

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "MonitorConfig":
        raw = raw or {}
        monitor = raw.get("monitor") or {}
        thresholds = raw.get("thresholds") or {}
        model = raw.get("model") or {}

        return cls(
            interval_ms=int(monitor.get("interval_ms", DEFAULT_INTERVAL_MS)),
            history_size=int(monitor.get("history_size", HISTORY_SIZE)),
            byte_threshold=int(thresholds.get("bytes", BYTE_THRESHOLD)),
            packet_threshold=int(thresholds.get("packets_per_second", PACKET_THRESHOLD)),
            device=str(model.get("device", "cpu")),
            seed=raw.get("seed"),
        )

"""
Detection Results & Rolling History

Every scored packet becomes one ``DetectionResult``. The history keeps only
the most recent entries (51 by default) and evicts the oldest first, so its
order is always chronological insertion order.
"""

from collections import deque
from dataclasses import asdict, dataclass
from typing import Any, Deque, Dict, Iterator, Tuple

import pandas as pd

HISTORY_SIZE = 51
HIGH_THREAT_LEVEL = 0.7


@dataclass(frozen=True)
class DetectionResult:
    timestamp: int
    threat: float
    details: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_detail(source_ip: str, is_anomaly: bool) -> str:
    if is_anomaly:
        return f"Anomalous traffic detected from {source_ip}"
    return f"Normal traffic pattern from {source_ip}"


def is_high_threat(result: DetectionResult, level: float = HIGH_THREAT_LEVEL) -> bool:
    """Alert-feed highlight rule: score strictly above ``level``."""
    return result.threat > level


class DetectionHistory:
    """
    Bounded FIFO of detection results.

    Args:
        maxlen (int): Number of most recent results to retain.
    """

    def __init__(self, maxlen: int = HISTORY_SIZE):
        if maxlen <= 0:
            raise ValueError(f"History size must be positive, got {maxlen}")
        self.maxlen = maxlen
        self._items: Deque[DetectionResult] = deque(maxlen=maxlen)

    def append(self, result: DetectionResult) -> None:
        self._items.append(result)

    def snapshot(self) -> Tuple[DetectionResult, ...]:
        """Read-only copy in chronological order."""
        return tuple(self._items)

    def recent(self, n: int = 5) -> Tuple[DetectionResult, ...]:
        """Up to ``n`` latest results, newest first."""
        if n <= 0:
            return ()
        return tuple(reversed(self._items))[:n]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [r.to_dict() for r in self._items],
            columns=["timestamp", "threat", "details"],
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DetectionResult]:
        return iter(self.snapshot())

"""
Synthetic Traffic Generator

Produces one fabricated packet summary per call. Nothing here touches a real
network interface: addresses, protocol and volumes are uniform random draws
inside fixed ranges.

Ranges:
- source IP        : 192.168.X.Y
- destination IP   : 10.0.X.Y
- X, Y             : uniform integers in [0, 255]
- protocol         : TCP or UDP with equal probability
- bytes transferred: uniform integer in [0, 2_000_000)
- packets/second   : uniform integer in [0, 2000)
"""

import random
import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

MAX_BYTES = 2_000_000
MAX_PACKETS_PER_SECOND = 2000

SOURCE_PREFIX = "192.168"
DESTINATION_PREFIX = "10.0"


class Protocol(str, Enum):
    TCP = "TCP"
    UDP = "UDP"


@dataclass(frozen=True)
class Packet:
    """A synthetic record standing in for a captured flow summary."""

    timestamp: int
    source_ip: str
    destination_ip: str
    protocol: Protocol
    bytes_transferred: int
    packets_per_second: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["protocol"] = self.protocol.value
        return data


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class TrafficGenerator:
    """
    Fabricates packets from an injectable random source and clock.

    Args:
        rng (random.Random, optional): Random source. A fresh unseeded
            instance is used when omitted.
        clock (callable, optional): Zero-argument callable returning epoch ms.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock

    def _address(self, prefix: str) -> str:
        return f"{prefix}.{self.rng.randint(0, 255)}.{self.rng.randint(0, 255)}"

    def generate(self) -> Packet:
        return Packet(
            timestamp=self.clock(),
            source_ip=self._address(SOURCE_PREFIX),
            destination_ip=self._address(DESTINATION_PREFIX),
            protocol=Protocol.TCP if self.rng.random() < 0.5 else Protocol.UDP,
            bytes_transferred=self.rng.randrange(MAX_BYTES),
            packets_per_second=self.rng.randrange(MAX_PACKETS_PER_SECOND),
        )

"""
Static threshold check, independent of the network score.
"""

BYTE_THRESHOLD = 1_000_000  # 1 MB
PACKET_THRESHOLD = 1000  # packets per second


def detect_anomaly(
    bytes_transferred: int,
    packets_per_second: int,
    byte_threshold: int = BYTE_THRESHOLD,
    packet_threshold: int = PACKET_THRESHOLD,
) -> bool:
    """True when either volume strictly exceeds its threshold."""
    return bytes_transferred > byte_threshold or packets_per_second > packet_threshold

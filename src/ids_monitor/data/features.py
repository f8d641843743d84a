"""
Feature Extraction

Maps a packet to the fixed 4-value input vector of the threat model:

    [bytes / 2_000_000, packets_per_second / 2000, is_tcp, noise]

The last slot is a uniform draw in [0, 1) that carries no signal. It is kept
so the model input stays 4 wide.
"""

from typing import List, Optional

import numpy as np

from .traffic import MAX_BYTES, MAX_PACKETS_PER_SECOND, Packet, Protocol

FEATURE_NAMES: List[str] = [
    "bytes_norm",
    "packets_per_second_norm",
    "is_tcp",
    "noise",
]
NUM_FEATURES = len(FEATURE_NAMES)


def extract_features(packet: Packet, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Build the model input vector for a single packet.

    Args:
        packet (Packet): Packet to encode.
        rng (np.random.Generator, optional): Source for the noise feature.

    Returns:
        np.ndarray: float32 array of shape (4,).
    """
    rng = rng if rng is not None else np.random.default_rng()

    return np.array(
        [
            packet.bytes_transferred / MAX_BYTES,
            packet.packets_per_second / MAX_PACKETS_PER_SECOND,
            1.0 if packet.protocol == Protocol.TCP else 0.0,
            rng.random(),
        ],
        dtype=np.float32,
    )

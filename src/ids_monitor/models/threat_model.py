"""
Threat Scoring Network

A deliberately small feed-forward network used as a placeholder scorer:

    Linear(4 -> 16) + ReLU
    Linear(16 -> 8) + ReLU
    Linear(8 -> 1)  + Sigmoid   -> threat score in (0, 1)

The weights come from Glorot-uniform initialization and are never trained or
saved, so scores carry no statistical meaning and differ between runs unless
a seed is given. Anything implementing ``ThreatScorer`` can replace the
network without touching the monitoring pipeline.
"""

import asyncio
import logging
from typing import Optional, Protocol, Sequence, Union

import numpy as np
import torch
import torch.nn as nn

from ..data.features import NUM_FEATURES
from ..utils.helpers import count_parameters, get_device

logger = logging.getLogger(__name__)

FeatureInput = Union[np.ndarray, Sequence[float]]


class ModelNotInitializedError(RuntimeError):
    """Raised when scoring is attempted before ``initialize()`` completed."""

    def __init__(self, message: str = "Model not initialized"):
        super().__init__(message)


class ThreatScorer(Protocol):
    """Scoring interface consumed by the monitor."""

    @property
    def is_ready(self) -> bool: ...

    async def initialize(self) -> None: ...

    async def predict(self, features: FeatureInput) -> float: ...


class ThreatMLP(nn.Module):
    def __init__(self, input_dim: int = NUM_FEATURES, hidden1: int = 16, hidden2: int = 8):
        super().__init__()
        self.input_dim = input_dim

        self.net = nn.Sequential(
            nn.Linear(input_dim, hidden1),
            nn.ReLU(),
            nn.Linear(hidden1, hidden2),
            nn.ReLU(),
            nn.Linear(hidden2, 1),
            nn.Sigmoid(),
        )
        self._init_weights()

    def _init_weights(self):
        # Glorot uniform / zero bias
        for m in self.modules():
            if isinstance(m, nn.Linear):
                nn.init.xavier_uniform_(m.weight)
                nn.init.zeros_(m.bias)

    def forward(self, x):
        return self.net(x)

    def count_parameters(self) -> int:
        return count_parameters(self)


class IntrusionDetectionModel:
    """
    Async wrapper around ``ThreatMLP`` with an Uninitialized -> Ready lifecycle.

    Args:
        device (str, optional): Inference device, "auto" picks the best one.
        seed (int, optional): Seed for the weight initializer.
    """

    def __init__(self, device: Optional[str] = "cpu", seed: Optional[int] = None):
        self.device = get_device(device)
        self.seed = seed
        self.model: Optional[ThreatMLP] = None

    @property
    def is_ready(self) -> bool:
        return self.model is not None

    async def initialize(self) -> None:
        if self.model is not None:
            logger.warning("Threat model already initialized; keeping existing weights.")
            return

        if self.seed is not None:
            # seed only the weight init, leave the global torch RNG untouched
            with torch.random.fork_rng(devices=[]):
                torch.manual_seed(self.seed)
                model = ThreatMLP()
        else:
            model = ThreatMLP()
        model.to(self.device).eval()
        self.model = model

        logger.info(
            "Threat model ready on %s (%d parameters)",
            self.device,
            model.count_parameters(),
        )

    def _forward(self, features: np.ndarray) -> float:
        inputs = torch.as_tensor(features, dtype=torch.float32, device=self.device).reshape(1, -1)
        with torch.no_grad():
            output = self.model(inputs)
        score = float(output.item())
        del inputs, output
        return score

    async def predict(self, features: FeatureInput) -> float:
        """
        Score one feature vector with a single forward pass.

        The pass runs in a worker thread so the event loop keeps ticking.

        Args:
            features: 4 numeric features.

        Returns:
            float: Raw sigmoid output in (0, 1).

        Raises:
            ModelNotInitializedError: If ``initialize()`` has not completed.
            ValueError: If the vector does not hold exactly 4 values.
        """
        if self.model is None:
            raise ModelNotInitializedError()

        vector = np.asarray(features, dtype=np.float32).reshape(-1)
        if vector.shape[0] != self.model.input_dim:
            raise ValueError(
                f"Expected {self.model.input_dim} features, got {vector.shape[0]}"
            )

        return await asyncio.to_thread(self._forward, vector)


def create_threat_model(device: Optional[str] = "cpu", seed: Optional[int] = None) -> IntrusionDetectionModel:
    """Factory returning an uninitialized scorer; call ``await initialize()`` before use."""
    return IntrusionDetectionModel(device=device, seed=seed)

"""
Helper Utilities for the Traffic Monitor

This module provides reusable utility functions shared by the monitor,
the scoring model and the command-line entry point, including:
- Reproducibility via global seeding
- Automatic device selection (MPS / CUDA / CPU)
- Model parameter counting
- YAML configuration loading
- Logging setup
"""

import logging
import os
import random
from typing import Any, Dict, Optional

import numpy as np
import torch
import torch.nn as nn
import yaml

LOG_FORMAT = "[%(levelname)s] %(message)s"

# --------------------------------------------------
# Reproducibility utilities
# --------------------------------------------------

def set_seed(seed: int = 42) -> None:
    """
    Set global random seeds so a monitoring session can be replayed.

    This function synchronizes random states across:
    - Python's built-in random module
    - NumPy
    - PyTorch (CPU and CUDA)

    Args:
        seed (int): Seed value used across all random generators.
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    torch.cuda.manual_seed_all(seed)


# --------------------------------------------------
# Device selection
# --------------------------------------------------

def get_device(preferred: Optional[str] = None) -> torch.device:
    """
    Select the computation device for inference.

    Priority order when no preference is given:
    1. Apple Silicon GPU via MPS
    2. NVIDIA GPU via CUDA
    3. CPU as a fallback

    Args:
        preferred (str, optional): Explicit device name ("cpu", "cuda", "mps").
            "auto" or None triggers automatic selection.

    Returns:
        torch.device: Selected computation device.
    """
    if preferred and preferred.lower() != "auto":
        return torch.device(preferred.lower())

    if torch.backends.mps.is_available():
        return torch.device("mps")
    elif torch.cuda.is_available():
        return torch.device("cuda")
    else:
        return torch.device("cpu")


# --------------------------------------------------
# Model inspection
# --------------------------------------------------

def count_parameters(model: nn.Module) -> int:
    """
    Count the total number of trainable parameters in a PyTorch model.

    Args:
        model (nn.Module): Model instance to inspect.

    Returns:
        int: Number of parameters with requires_grad=True.
    """
    return sum(p.numel() for p in model.parameters() if p.requires_grad)


# --------------------------------------------------
# Configuration
# --------------------------------------------------

def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        config_path (str): Path to the YAML config file.

    Returns:
        dict: Parsed configuration dictionary (empty for an empty file).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


# --------------------------------------------------
# Logging
# --------------------------------------------------

def setup_logging(level: str = "INFO") -> None:
    """Route package loggers to stderr using the bracket-tag format."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)

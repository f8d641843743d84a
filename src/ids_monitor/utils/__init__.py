"""
Utility Module for the Traffic Monitor

Provides:
    - Reproducibility helpers (seed, device)
    - Model inspection (parameter count)
    - YAML config loading and logging setup
"""

from .helpers import (
    set_seed,
    get_device,
    count_parameters,
    load_config,
    setup_logging,
)

__all__ = [
    "set_seed",
    "get_device",
    "count_parameters",
    "load_config",
    "setup_logging",
]

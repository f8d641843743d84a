"""
IDS Traffic Monitor

This package provides modular components for:
    • Synthetic packet generation (no real capture)
    • Packet -> 4-value feature encoding
    • An untrained 4-16-8-1 scoring network plus static volume thresholds
    • A timer-driven monitor with a bounded result history and session counters

Structure:
    ids_monitor/
    ├─ data/        → packet generator & feature extraction
    ├─ models/      → threat network & threshold check
    ├─ monitoring/  → monitor loop, history, counters, config
    ├─ utils/       → seeding, device, config & logging helpers
"""

__version__ = "0.1.0"

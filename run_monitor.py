"""
IDS – Traffic Monitor Runner

Runs the synthetic monitoring session from the command line.

Pipeline:
1. Load YAML config (optional)
2. Initialize the untrained threat model
3. Generate one packet per tick and score it
4. Print each result, then a session summary
5. Optionally export the retained history to CSV
"""

import argparse
import asyncio
import os
import sys

# -------------------------
# PATH SETUP
# -------------------------
SRC = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if SRC not in sys.path:
    sys.path.append(SRC)

from ids_monitor.monitoring import MonitorConfig, TrafficMonitor, is_high_threat
from ids_monitor.utils.helpers import load_config, set_seed, setup_logging

DEFAULT_CONFIG_PATH = "configs/monitor_config.yaml"


def print_result(result, is_anomaly):
    tag = "[ALERT]" if is_anomaly else "[INFO]"
    level = "HIGH" if is_high_threat(result) else "low"
    print(f"{tag} {result.timestamp} | threat={result.threat * 100:.1f}% ({level}) | {result.details}")


def build_config(args) -> MonitorConfig:
    raw = {}
    if args.config is not None:
        raw = load_config(args.config)
    elif os.path.exists(DEFAULT_CONFIG_PATH):
        raw = load_config(DEFAULT_CONFIG_PATH)
    else:
        print(f"[WARN] Config not found: {DEFAULT_CONFIG_PATH}, using defaults.")

    raw["monitor"] = raw.get("monitor") or {}
    if args.interval_ms is not None:
        raw["monitor"]["interval_ms"] = args.interval_ms
    if args.seed is not None:
        raw["seed"] = args.seed

    return MonitorConfig.from_dict(raw)


async def run(config: MonitorConfig, ticks: int) -> TrafficMonitor:
    monitor = TrafficMonitor(config)
    monitor.add_listener(print_result)
    await monitor.run_for(ticks)
    return monitor


def main():
    parser = argparse.ArgumentParser(description="Synthetic network intrusion monitor")
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--ticks", type=int, default=10, help="Packets to process before exiting.")
    parser.add_argument("--interval_ms", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--export_csv", type=str, default=None,
                        help="Write the retained history to this CSV path.")
    parser.add_argument("--log_level", type=str, default="WARNING")
    args = parser.parse_args()

    setup_logging(args.log_level)
    config = build_config(args)
    if config.seed is not None:
        set_seed(config.seed)

    print("=" * 60)
    print(f"[INFO] Monitoring {args.ticks} packets every {config.interval_ms} ms")
    print("=" * 60)

    monitor = asyncio.run(run(config, args.ticks))
    summary = monitor.summary()

    print("=" * 60)
    print(f"Packets analyzed : {summary['packets_analyzed']}")
    print(f"Active threats   : {summary['active_threats']}")
    print(f"Mean threat      : {summary['mean_threat'] * 100:.2f}%")
    print(f"Max threat       : {summary['max_threat'] * 100:.2f}%")
    print(f"Distribution     : {summary['threat_distribution']}")
    print("=" * 60)

    if args.export_csv:
        os.makedirs(os.path.dirname(args.export_csv) or ".", exist_ok=True)
        monitor.history.to_dataframe().to_csv(args.export_csv, index=False)
        print(f"[SAVE] {args.export_csv}")


if __name__ == "__main__":
    main()

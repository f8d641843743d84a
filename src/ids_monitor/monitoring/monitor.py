"""
Traffic Monitor – Timer-Driven Detection Pipeline

    producer task : every interval -> generate packet -> queue
    consumer task : queue -> extract features -> score + threshold
                    -> DetectionResult -> history & counters

A single consumer drains the queue, so results land in the history in the
order the packets were generated even though scoring suspends on the model.
After ``stop()`` the monitor is closed: pending tasks are cancelled and any
score that resolves afterwards is dropped instead of being written.
"""

import asyncio
import logging
import random
from typing import Callable, List, Optional, Tuple

import numpy as np

from ..data.features import extract_features
from ..data.traffic import Packet, TrafficGenerator
from ..models.threat_model import ThreatScorer, create_threat_model
from ..models.thresholds import detect_anomaly
from .config import MonitorConfig
from .history import DetectionHistory, DetectionResult, build_detail
from .session import SessionStats

logger = logging.getLogger(__name__)

ResultListener = Callable[[DetectionResult, bool], None]


class TrafficMonitor:
    """
    Owns the scorer, generator, history and session counters of one session.

    Args:
        config (MonitorConfig, optional): Interval, history size, thresholds,
            device and seed.
        model (ThreatScorer, optional): Scorer to use. Defaults to the
            untrained network from ``create_threat_model``.
        generator (TrafficGenerator, optional): Packet source.
        noise_rng (np.random.Generator, optional): Source of the noise feature.
    """

    def __init__(
        self,
        config: Optional[MonitorConfig] = None,
        model: Optional[ThreatScorer] = None,
        generator: Optional[TrafficGenerator] = None,
        noise_rng: Optional[np.random.Generator] = None,
    ):
        self.config = config if config is not None else MonitorConfig()
        seed = self.config.seed

        self.model = model if model is not None else create_threat_model(
            device=self.config.device, seed=seed
        )
        self.generator = generator if generator is not None else TrafficGenerator(
            rng=random.Random(seed) if seed is not None else None
        )
        self.noise_rng = noise_rng if noise_rng is not None else np.random.default_rng(seed)

        self.history = DetectionHistory(self.config.history_size)
        self.stats = SessionStats()

        self._listeners: List[ResultListener] = []
        self._queue: Optional[asyncio.Queue] = None
        self._producer: Optional[asyncio.Task] = None
        self._consumer: Optional[asyncio.Task] = None
        self._progress: Optional[asyncio.Event] = None
        self._closed = False
        self._stopped = False

    # -----------------------------------------------------
    # Read-only views
    # -----------------------------------------------------
    @property
    def packets_analyzed(self) -> int:
        return self.stats.packets_analyzed

    @property
    def active_threats(self) -> int:
        return self.stats.active_threats

    @property
    def is_running(self) -> bool:
        return self._producer is not None and not self._closed

    @property
    def is_closed(self) -> bool:
        return self._closed

    def snapshot(self) -> Tuple[DetectionResult, ...]:
        return self.history.snapshot()

    def summary(self) -> dict:
        return self.stats.summary(self.history)

    def add_listener(self, listener: ResultListener) -> None:
        """Register a callback invoked with every appended result and its anomaly flag."""
        self._listeners.append(listener)

    # -----------------------------------------------------
    # Pipeline step
    # -----------------------------------------------------
    async def process_packet(self, packet: Packet) -> Optional[DetectionResult]:
        """
        Score one packet and record the outcome.

        Returns:
            DetectionResult, or None when the monitor was closed before the
            score resolved.

        Raises:
            ModelNotInitializedError: If the scorer is not ready.
        """
        if self._closed:
            return None

        features = extract_features(packet, self.noise_rng)
        threat = await self.model.predict(features)
        is_anomaly = detect_anomaly(
            packet.bytes_transferred,
            packet.packets_per_second,
            byte_threshold=self.config.byte_threshold,
            packet_threshold=self.config.packet_threshold,
        )

        if self._closed:
            logger.debug("Discarding late result for packet from %s", packet.source_ip)
            return None

        result = DetectionResult(
            timestamp=packet.timestamp,
            threat=threat,
            details=build_detail(packet.source_ip, is_anomaly),
        )
        self.history.append(result)
        self.stats.record(is_anomaly)

        if is_anomaly:
            logger.info("%s (threat=%.4f)", result.details, threat)
        else:
            logger.debug("%s (threat=%.4f)", result.details, threat)

        for listener in self._listeners:
            listener(result, is_anomaly)
        if self._progress is not None:
            self._progress.set()

        return result

    # -----------------------------------------------------
    # Producer / consumer
    # -----------------------------------------------------
    async def _produce(self) -> None:
        interval = self.config.interval_sec
        while True:
            await asyncio.sleep(interval)
            packet = self.generator.generate()
            self._queue.put_nowait(packet)

    async def _consume(self) -> None:
        while True:
            packet = await self._queue.get()
            try:
                await self.process_packet(packet)
            except Exception:
                logger.exception("Scoring failed for packet from %s", packet.source_ip)
                raise
            finally:
                self._queue.task_done()

    # -----------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------
    async def start(self) -> None:
        """Initialize the scorer (if needed) and start the periodic tick."""
        if self._closed:
            raise RuntimeError("Monitor has been stopped and cannot be restarted")
        if self._producer is not None:
            return

        if not self.model.is_ready:
            await self.model.initialize()

        self._queue = asyncio.Queue()
        self._progress = asyncio.Event()
        self._producer = asyncio.create_task(self._produce())
        self._consumer = asyncio.create_task(self._consume())
        self._consumer.add_done_callback(self._on_consumer_done)

        logger.info(
            "Monitor started (interval=%d ms, history=%d)",
            self.config.interval_ms,
            self.config.history_size,
        )

    def _on_consumer_done(self, task: asyncio.Task) -> None:
        # a dead consumer ends the session: no more ticks, no more writes
        if task.cancelled() or task.exception() is None:
            return
        self._closed = True
        if self._producer is not None:
            self._producer.cancel()

    async def stop(self) -> None:
        """
        Cancel the tick and the consumer; late scores are discarded.

        Re-raises the error that ended the consumer, if any.
        """
        if self._stopped:
            return
        self._stopped = True
        self._closed = True

        tasks = [t for t in (self._producer, self._consumer) if t is not None]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        logger.info(
            "Monitor stopped (packets_analyzed=%d, active_threats=%d)",
            self.stats.packets_analyzed,
            self.stats.active_threats,
        )

        consumer = self._consumer
        if consumer is not None and not consumer.cancelled() and consumer.exception() is not None:
            raise consumer.exception()

    async def run_for(self, ticks: int) -> Tuple[DetectionResult, ...]:
        """
        Run until ``ticks`` packets have been processed, then stop.

        Re-raises the consumer's error if scoring fails on the way.
        """
        await self.start()
        try:
            while self.stats.packets_analyzed < ticks:
                waiter = asyncio.ensure_future(self._progress.wait())
                done, _ = await asyncio.wait(
                    {waiter, self._consumer}, return_when=asyncio.FIRST_COMPLETED
                )
                if self._consumer in done:
                    waiter.cancel()
                    break
                self._progress.clear()
        finally:
            await self.stop()
        return self.history.snapshot()

    async def __aenter__(self) -> "TrafficMonitor":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

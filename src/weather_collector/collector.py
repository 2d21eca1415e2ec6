"""
Collection loop.

Waits a fixed warm-up delay, runs one fetch-then-write cycle immediately, then
one cycle per interval tick until stopped::

    idle → warmup → running → stopped

Ticks sit on a fixed grid anchored at the first cycle. A cycle never starts
while another is in progress: ticks missed because a cycle overran the
interval are skipped, not queued. ``stop()`` may be called from a signal
handler; it cuts any wait short, and an in-progress cycle runs to completion.
"""

from __future__ import annotations

import logging
import threading
import time
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from weather_collector.config import Settings
    from weather_collector.schemas import Result
    from weather_collector.source import WeatherSource
    from weather_collector.store import PointWriter

logger = logging.getLogger(__name__)


class CollectorState(StrEnum):
    """Lifecycle of a collector."""

    IDLE = "idle"
    WARMUP = "warmup"
    RUNNING = "running"
    STOPPED = "stopped"


class Collector:
    """Periodic fetch-then-write loop for one source and one writer."""

    def __init__(
        self,
        source: WeatherSource,
        writer: PointWriter,
        *,
        interval: float,
        warmup: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
        stop_event: threading.Event | None = None,
    ) -> None:
        """
        Args:
            source: Where readings come from.
            writer: Where readings go.
            interval: Seconds between ticks (must be positive).
            warmup: Seconds to wait before the first cycle.
            clock: Monotonic time source.
            stop_event: Event that ends the loop when set (a fresh one by default).
        """
        if interval <= 0:
            msg = f"interval must be positive, got {interval}"
            raise ValueError(msg)
        if warmup < 0:
            msg = f"warmup must not be negative, got {warmup}"
            raise ValueError(msg)
        self.source = source
        self.writer = writer
        self.interval = interval
        self.warmup = warmup
        self.state = CollectorState.IDLE
        self._clock = clock
        self._stop = stop_event or threading.Event()
        self._busy = threading.Lock()

    @classmethod
    def from_settings(
        cls, settings: Settings, source: WeatherSource, writer: PointWriter
    ) -> Collector:
        """Collector using the configured interval and warm-up delay."""
        return cls(
            source,
            writer,
            interval=settings.interval_seconds,
            warmup=settings.warmup_seconds,
        )

    @property
    def stopping(self) -> bool:
        return self._stop.is_set()

    def stop(self) -> None:
        """Request shutdown. Safe to call from a signal handler, and more than once."""
        self._stop.set()

    def collect_once(self) -> Result | None:
        """
        Run one fetch-then-write cycle.

        Returns:
            The writer's result, or None if another cycle was already running
            and this one was skipped.
        """
        if not self._busy.acquire(blocking=False):
            logger.warning("Previous collection still running, skipping this tick")
            return None
        try:
            logger.info("Collecting weather data...")
            reading = self.source.fetch()
            return self.writer.write(reading)
        finally:
            self._busy.release()

    def run(self) -> int:
        """
        Warm up, then collect on every tick until ``stop()`` is called.

        An exception from the first cycle is a startup failure and propagates.
        Later cycles that raise are logged and the schedule carries on.

        Returns:
            Number of cycles completed.
        """
        cycles = 0
        try:
            self.state = CollectorState.WARMUP
            logger.info("Waiting %.1fs for InfluxDB to be ready...", self.warmup)
            if self._stop.wait(self.warmup):
                return cycles

            self.state = CollectorState.RUNNING
            logger.info("Starting weather data collection...")
            next_tick = self._clock()
            if self.collect_once() is not None:
                cycles += 1
            while True:
                next_tick = self._next_tick(next_tick)
                if self._stop.wait(max(0.0, next_tick - self._clock())):
                    break
                try:
                    if self.collect_once() is not None:
                        cycles += 1
                except Exception:
                    logger.exception("Collection cycle failed")
        finally:
            self.state = CollectorState.STOPPED
            logger.info("Collector stopped after %d cycle(s)", cycles)
        return cycles

    def _next_tick(self, previous: float) -> float:
        """Next grid point after ``previous``, skipping any already in the past."""
        next_tick = previous + self.interval
        now = self._clock()
        if now > next_tick:
            missed = int((now - next_tick) // self.interval) + 1
            logger.warning(
                "Collection overran the %.1fs interval, skipping %d tick(s)",
                self.interval,
                missed,
            )
            next_tick += missed * self.interval
        return next_tick

"""
Session-wide aggregation of exchange measurements.

Stores measurements in arrival order and derives summary statistics on
demand, the same way for an empty session as for a long one.
"""

from __future__ import annotations

import logging
import statistics
import threading
from typing import List, Tuple

from ..models.measurement import Measurement, SessionStatistics


logger = logging.getLogger(__name__)


class SessionAggregator:
    """
    Append-only store of measurements with lazily computed statistics.

    Latency figures cover successful exchanges only. Throughput is the mean
    of per-exchange rates, not total tokens over total time. The session
    span covers every exchange, failed or not.
    """

    def __init__(self):
        self._measurements: List[Measurement] = []
        self._lock = threading.Lock()

    def record(self, measurement: Measurement) -> None:
        """Append a measurement, successful or not."""
        with self._lock:
            self._measurements.append(measurement)

    def reset(self) -> None:
        """Drop every recorded measurement."""
        with self._lock:
            dropped = len(self._measurements)
            self._measurements = []
        logger.info(f"Session statistics reset ({dropped} measurements dropped)")

    @property
    def measurements(self) -> Tuple[Measurement, ...]:
        with self._lock:
            return tuple(self._measurements)

    def __len__(self) -> int:
        return len(self._measurements)

    def snapshot(self) -> SessionStatistics:
        """
        Compute statistics over the current measurements.

        Returns:
            SessionStatistics; every numeric field is 0 when nothing applies
        """
        measurements = self.measurements
        if not measurements:
            return SessionStatistics()

        successes = [m for m in measurements if m.succeeded]
        latencies = [m.elapsed_seconds for m in successes]
        rates = [m.tokens_per_second for m in successes if m.tokens_per_second is not None]

        span = max(m.end_time for m in measurements) - min(m.start_time for m in measurements)

        return SessionStatistics(
            total_requests=len(measurements),
            successful_requests=len(successes),
            failed_requests=len(measurements) - len(successes),
            average_response_seconds=statistics.mean(latencies) if latencies else 0.0,
            fastest_response_seconds=min(latencies) if latencies else 0.0,
            slowest_response_seconds=max(latencies) if latencies else 0.0,
            average_tokens_per_second=statistics.mean(rates) if rates else 0.0,
            total_session_seconds=max(span.total_seconds(), 0.0)
        )

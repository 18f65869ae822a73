"""
Timing of single prompt/response exchanges.

The recorder wraps one provider call with a monotonic stopwatch and two
wall-clock readings and always hands back a ``Measurement``, whether the
call succeeded or not.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Awaitable, Callable, Optional, Union

from ..models.measurement import ExchangeResult, Measurement
from .tokens import estimate_tokens


logger = logging.getLogger(__name__)

InvokeResult = Union[str, ExchangeResult]


class MetricsRecorder:
    """
    Produces a ``Measurement`` for each exchange.

    Features:
    - Monotonic stopwatch for elapsed time
    - Wall-clock start/end instants for session span
    - Failures captured as unsuccessful measurements, never raised
    """

    def __init__(
        self,
        stopwatch: Optional[Callable[[], float]] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialize the recorder.

        Args:
            stopwatch: Monotonic time source in seconds (default ``time.perf_counter``)
            clock: Wall-clock source (default ``datetime.now``)
        """
        self._stopwatch = stopwatch or time.perf_counter
        self._clock = clock or datetime.now

    def measure(self, invoke: Callable[[], InvokeResult]) -> Measurement:
        """
        Time a synchronous exchange.

        Args:
            invoke: Zero-argument callable performing the provider call once

        Returns:
            Measurement for the exchange
        """
        start_time = self._clock()
        started = self._stopwatch()
        try:
            outcome = self._as_result(invoke())
        except Exception as e:
            outcome = ExchangeResult.from_exception(e)
        return self._finish(outcome, started, start_time)

    async def measure_async(self, invoke: Callable[[], Awaitable[InvokeResult]]) -> Measurement:
        """
        Time an awaited exchange.

        Args:
            invoke: Zero-argument callable returning an awaitable for the provider call

        Returns:
            Measurement for the exchange
        """
        start_time = self._clock()
        started = self._stopwatch()
        try:
            outcome = self._as_result(await invoke())
        except Exception as e:
            outcome = ExchangeResult.from_exception(e)
        return self._finish(outcome, started, start_time)

    # Private methods

    @staticmethod
    def _as_result(value: InvokeResult) -> ExchangeResult:
        if isinstance(value, ExchangeResult):
            return value
        return ExchangeResult.success(value if value is not None else "")

    def _finish(self, outcome: ExchangeResult, started: float, start_time: datetime) -> Measurement:
        elapsed_ms = max(0, int((self._stopwatch() - started) * 1000))
        end_time = max(self._clock(), start_time)

        if outcome.succeeded:
            return Measurement(
                response_text=outcome.text,
                elapsed_ms=elapsed_ms,
                start_time=start_time,
                end_time=end_time,
                estimated_tokens=estimate_tokens(outcome.text),
                succeeded=True
            )

        description = (outcome.error or "").strip() or "Error: exchange failed"
        logger.warning(f"Exchange failed after {elapsed_ms} ms: {description}")
        return Measurement(
            response_text=description,
            elapsed_ms=elapsed_ms,
            start_time=start_time,
            end_time=end_time,
            estimated_tokens=0,
            succeeded=False
        )

"""Fixed-rate axis polling thread.

This is the evaluating side of the editor/evaluator pair: it reads raw
samples from an input source, runs them through an AxisChannel and hands
the result to an output sink, at a fixed rate, for as long as the mapping
is active. Curve edits reach it only through the channel's publisher.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
import threading
import time

from hotascurve.core.config.models import RuntimeConfig
from hotascurve.core.runtime.channel import AxisChannel

logger = logging.getLogger(__name__)

SampleSource = Callable[[], Sequence[float]]
OutputSink = Callable[[float], None]


class AxisPoller:
    """Background loop driving one AxisChannel.

    A source or sink that raises is logged and the loop carries on with the
    next tick; devices can drop out for a moment while being re-acquired.

    Args:
        channel: Channel to evaluate.
        source: Returns the raw samples for this tick.
        sink: Receives the shaped output.
        rate_hz: Ticks per second.
        name: Thread name, used in log records.
    """

    def __init__(
        self,
        channel: AxisChannel,
        source: SampleSource,
        sink: OutputSink,
        rate_hz: float = 500.0,
        name: str = "axis-poller",
    ) -> None:
        if rate_hz <= 0:
            raise ValueError(f"rate_hz must be > 0, got {rate_hz}")
        self.channel = channel
        self.source = source
        self.sink = sink
        self.update_interval = 1.0 / rate_hz
        self.name = name
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._ticks = 0
        self._errors = 0

    @classmethod
    def from_config(
        cls,
        channel: AxisChannel,
        source: SampleSource,
        sink: OutputSink,
        config: RuntimeConfig | None = None,
        name: str = "axis-poller",
    ) -> AxisPoller:
        """Build a poller ticking at ``config.poll_rate_hz``.

        Example:
            >>> poller = AxisPoller.from_config(channel, read_stick, write_axis, app.runtime)
        """
        config = config or RuntimeConfig()
        return cls(channel, source, sink, rate_hz=config.poll_rate_hz, name=name)

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def ticks(self) -> int:
        """Completed polling ticks."""
        return self._ticks

    @property
    def errors(self) -> int:
        """Ticks that failed in the source or sink."""
        return self._errors

    def start(self) -> None:
        """Start the polling thread."""
        if self.is_running:
            raise RuntimeError(f"{self.name} is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._poll_loop, name=self.name, daemon=True)
        self._thread.start()
        logger.info(f"{self.name} started at {1.0 / self.update_interval:.0f} Hz")

    def stop(self, timeout: float = 1.0) -> None:
        """Stop the polling thread and wait for it to exit.

        If the thread is still inside a tick when ``timeout`` expires, it is
        kept as the running thread, so ``start()`` refuses until it is gone.
        """
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning(f"{self.name} did not stop within {timeout}s")
                return
            self._thread = None
        logger.info(f"{self.name} stopped after {self._ticks} ticks ({self._errors} errors)")

    def poll_once(self) -> float | None:
        """Run a single tick. Returns the output, or None if the tick failed."""
        try:
            value = self.channel.process(self.source())
            self.sink(value)
        except Exception:
            self._errors += 1
            logger.exception(f"{self.name}: tick failed")
            return None
        finally:
            self._ticks += 1
        return value

    def _poll_loop(self) -> None:
        next_tick = time.perf_counter()
        while not self._stop_event.is_set():
            self.poll_once()
            next_tick += self.update_interval
            delay = next_tick - time.perf_counter()
            if delay > 0:
                self._stop_event.wait(delay)
            else:
                # Fell behind; resync instead of bursting to catch up.
                next_tick = time.perf_counter()

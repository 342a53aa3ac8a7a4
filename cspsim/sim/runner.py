import logging
import threading
import time
from typing import Callable, List, Optional

from cspsim.sim.plant_sim import PlantSimulator
from cspsim.sim.snapshot import PlantSnapshot

logger = logging.getLogger(__name__)

TickCallback = Callable[[PlantSnapshot], None]


class SimulationRunner:
    """
    Drives a PlantSimulator in real time.

    One background thread executes one tick every ``period_s`` wall-clock
    seconds. A tick that takes longer than the period only delays the next
    one; missed ticks are not caught up. Controls and ticks are serialized by
    a lock, so a tick always completes before a reset or selection change is
    applied.
    """

    def __init__(self, simulator: PlantSimulator, period_s: float = 0.1):
        if period_s <= 0:
            raise ValueError("period_s must be positive.")
        self.simulator = simulator
        self.period_s = period_s
        self._callbacks: List[TickCallback] = []
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._latest: PlantSnapshot = simulator.snapshot()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def latest(self) -> PlantSnapshot:
        """Most recent snapshot, safe to read from any thread."""
        return self._latest

    def add_callback(self, callback: TickCallback) -> None:
        """Register a function called with the snapshot after every tick."""
        self._callbacks.append(callback)

    def start(self) -> None:
        if self.is_running:
            raise RuntimeError("Simulation is already running.")
        # A fresh event per thread, so a restart never revives an old loop
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._loop, args=(self._stop_event,), name="cspsim-runner", daemon=True
        )
        self._thread.start()
        logger.info("Simulation started (period %.3f s, %dx)", self.period_s, self.simulator.clock.multiplier)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop after the tick in progress, if any, has completed."""
        if self._thread is None:
            return
        self._stop_event.set()
        if threading.current_thread() is self._thread:
            # Called from a tick callback; the loop exits after this tick
            return
        self._thread.join(timeout)
        if self._thread.is_alive():
            # Still inside a tick; is_running stays true until the loop exits
            logger.warning("Runner thread did not stop within %s s", timeout)
            return
        self._thread = None
        logger.info("Simulation stopped at tick %d", self.simulator.clock.tick_count)

    def reset(self) -> PlantSnapshot:
        with self._lock:
            self._latest = self.simulator.reset()
        return self._latest

    def configure(self, **selections: Optional[str]) -> None:
        """Forward catalog selections to the simulator between ticks."""
        with self._lock:
            self.simulator.configure(**selections)
            self._latest = self.simulator.snapshot()

    def tick(self) -> PlantSnapshot:
        """Execute one tick synchronously and notify the callbacks."""
        with self._lock:
            snapshot = self.simulator.step()
            self._latest = snapshot
        for callback in self._callbacks:
            callback(snapshot)
        return snapshot

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            started = time.monotonic()
            self.tick()
            elapsed = time.monotonic() - started
            if elapsed > self.period_s:
                logger.warning("Tick took %.3f s, longer than the %.3f s period", elapsed, self.period_s)
            stop_event.wait(max(0.0, self.period_s - elapsed))

"""
Scheduler: Triggers measurement cycles at a fixed interval.

Ticks keep a steady cadence; each tick starts the cycle on a worker thread.
A run-lock guarantees at most one cycle in flight, so a tick that lands
while the previous cycle is still running is skipped.
"""

import threading
import time
from typing import Callable, Optional


class Scheduler:
    """
    Fixed-interval cycle scheduler.

    The first cycle fires one interval after start. A cycle that raises is
    logged and never stops later ticks.
    """

    def __init__(self, interval_sec: float, cycle_callback: Callable[[], object]):
        """
        Initialize scheduler.

        Args:
            interval_sec: Seconds between ticks
            cycle_callback: Function to call on each tick
        """
        if interval_sec <= 0:
            raise ValueError(f"interval_sec must be > 0, got {interval_sec}")
        self.interval_sec = interval_sec
        self.cycle_callback = cycle_callback
        self.running = False
        self.last_cycle_ts: float = 0.0
        self.cycles_started = 0
        self.skipped_ticks = 0
        self._run_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._worker: Optional[threading.Thread] = None

    @property
    def busy(self) -> bool:
        return self._run_lock.locked()

    def tick(self) -> bool:
        """
        Start a cycle unless one is already running.

        Returns:
            True if a cycle was started, False if the tick was skipped
        """
        if not self._run_lock.acquire(blocking=False):
            self.skipped_ticks += 1
            print("[Scheduler] Previous cycle still running, skipping tick")
            return False

        self.cycles_started += 1
        self._worker = threading.Thread(target=self._run_cycle, name="measurement-cycle", daemon=True)
        self._worker.start()
        return True

    def _run_cycle(self):
        try:
            self.cycle_callback()
            self.last_cycle_ts = time.time()
        except Exception as e:
            print(f"[Scheduler] ERROR during cycle: {e}")
        finally:
            self._run_lock.release()

    def run_forever(self):
        """
        Run scheduler loop until stopped.

        Blocks. Calls cycle_callback (via tick) once per interval.
        """
        self.running = True
        self._stop_event.clear()
        print(f"[Scheduler] Started. Interval={self.interval_sec}s")

        next_tick = time.monotonic() + self.interval_sec
        while self.running:
            wait = next_tick - time.monotonic()
            if wait > 0 and self._stop_event.wait(wait):
                break

            self.tick()
            next_tick += self.interval_sec

            # Fell behind by more than a tick: realign instead of bursting
            now = time.monotonic()
            if next_tick <= now:
                missed = int((now - next_tick) // self.interval_sec) + 1
                self.skipped_ticks += missed
                next_tick += missed * self.interval_sec

        self.running = False

    def stop(self, timeout: Optional[float] = None):
        """Stop ticking and wait for the in-flight cycle to finish."""
        print("[Scheduler] Stopping...")
        self.running = False
        self._stop_event.set()
        worker = self._worker
        if worker is not None and worker.is_alive():
            worker.join(timeout)

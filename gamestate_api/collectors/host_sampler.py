from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path

from gamestate_api.collectors.base import OSCounterSource
from gamestate_api.collectors.proc_source import PROC_STAT, ProcCounterSource
from gamestate_api.collectors.psutil_source import PsutilCounterSource
from gamestate_api.models.host import CounterSample, HostSnapshot, UtilizationState

logger = logging.getLogger(__name__)


def default_counter_source(kind: str = "auto") -> OSCounterSource:
    """Pick the counter source for this platform.

    ``auto`` prefers ``/proc`` on Linux and falls back to psutil elsewhere.
    """
    if kind == "auto":
        kind = "proc" if sys.platform.startswith("linux") and Path(PROC_STAT).exists() else "psutil"
    if kind == "proc":
        return ProcCounterSource()
    if kind == "psutil":
        return PsutilCounterSource()
    raise ValueError(f"Unknown counter source: {kind!r}")


class ResourceSampler:
    """Turns successive raw counter samples into host utilization figures.

    CPU usage is the busy share of the ticks elapsed between the previous
    sample and this one, so the first call after construction reports 0.
    Peaks are running maxima over the sampler's lifetime.
    """

    def __init__(self, source: OSCounterSource | None = None) -> None:
        self._source = source if source is not None else default_counter_source()
        self._state = UtilizationState()
        self._lock = threading.Lock()

    @property
    def source(self) -> OSCounterSource:
        return self._source

    @property
    def state(self) -> UtilizationState:
        with self._lock:
            return self._state.model_copy()

    def sample(self) -> HostSnapshot:
        # Read inside the lock so baselines are always chronologically ordered.
        with self._lock:
            counters = self._source.read()
            current_cpu = self._cpu_percent(counters)
            total_mem, current_mem = self._memory_usage(counters)

            self._state.peak_cpu = max(self._state.peak_cpu, current_cpu)
            self._state.peak_memory = max(self._state.peak_memory, current_mem)

            return HostSnapshot(
                uptime_seconds=counters.uptime_seconds or 0,
                current_cpu=current_cpu,
                max_cpu=self._state.peak_cpu,
                total_mem=total_mem,
                current_mem=current_mem,
                max_mem=self._state.peak_memory,
            )

    # ── internals ───────────────────────────────────────

    def _cpu_percent(self, counters: CounterSample) -> float:
        if not counters.has_cpu:
            return 0.0

        previous = self._state.previous
        self._state.previous = counters
        if previous is None:
            return 0.0

        total_delta = counters.total_ticks - previous.total_ticks
        idle_delta = counters.idle_ticks - previous.idle_ticks
        if total_delta < 0 or idle_delta < 0:
            logger.debug("CPU counters went backwards, using current sample as new baseline")
            return 0.0
        if total_delta == 0:
            return 0.0

        percent = (1.0 - idle_delta / total_delta) * 100.0
        return round(min(max(percent, 0.0), 100.0), 2)

    @staticmethod
    def _memory_usage(counters: CounterSample) -> tuple[int, int]:
        total = counters.total_memory or 0
        if counters.total_memory is None or counters.available_memory is None:
            return total, 0
        return total, max(counters.total_memory - counters.available_memory, 0)

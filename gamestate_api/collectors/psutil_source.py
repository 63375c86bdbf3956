from __future__ import annotations

import time

import psutil

from gamestate_api.collectors.base import OSCounterSource

GUEST_FIELDS = ("guest", "guest_nice")


class PsutilCounterSource(OSCounterSource):
    """Native system counters through psutil (Windows, macOS, BSD).

    CPU times are cumulative seconds rather than jiffies; the sampler only
    ever looks at ratios of deltas so the unit does not matter.
    """

    name = "psutil"

    def read_cpu(self) -> tuple[float, float] | None:
        times = psutil.cpu_times()
        idle = times.idle + getattr(times, "iowait", 0.0)
        # guest time is already included in user and nice
        total = sum(v for field, v in times._asdict().items() if field not in GUEST_FIELDS)
        return idle, float(total)

    def read_memory(self) -> tuple[int, int | None] | None:
        vm = psutil.virtual_memory()
        return int(vm.total), int(vm.available)

    def read_uptime(self) -> int | None:
        return int(time.time() - psutil.boot_time())

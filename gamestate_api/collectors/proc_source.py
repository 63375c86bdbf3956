from __future__ import annotations

from pathlib import Path

from gamestate_api.collectors.base import OSCounterSource

PROC_STAT = "/proc/stat"
PROC_MEMINFO = "/proc/meminfo"
PROC_UPTIME = "/proc/uptime"


class ProcCounterSource(OSCounterSource):
    """Reads CPU, memory and uptime counters from the Linux ``/proc`` tree.

    ``/proc/meminfo`` reflects the container's limits on LXC-style hosts,
    which is what the game server actually gets to use.
    """

    name = "proc"

    def __init__(
        self,
        stat_path: str | Path = PROC_STAT,
        meminfo_path: str | Path = PROC_MEMINFO,
        uptime_path: str | Path = PROC_UPTIME,
    ) -> None:
        self.stat_path = Path(stat_path)
        self.meminfo_path = Path(meminfo_path)
        self.uptime_path = Path(uptime_path)

    def read_cpu(self) -> tuple[float, float] | None:
        with self.stat_path.open() as fh:
            fields = fh.readline().split()

        if not fields or fields[0] != "cpu":
            return None
        # user nice system idle iowait irq softirq steal
        values = [int(v) for v in fields[1:9]]
        if len(values) < 4:
            return None

        idle = values[3] + (values[4] if len(values) > 4 else 0)
        return float(idle), float(sum(values))

    def read_memory(self) -> tuple[int, int | None] | None:
        found: dict[str, int] = {}
        with self.meminfo_path.open() as fh:
            for line in fh:
                parts = line.split()
                if len(parts) < 2:
                    continue
                key = parts[0].rstrip(":")
                if key in ("MemTotal", "MemAvailable"):
                    found[key] = int(parts[1]) * 1024

        if "MemTotal" not in found:
            return None
        return found["MemTotal"], found.get("MemAvailable")

    def read_uptime(self) -> int | None:
        text = self.uptime_path.read_text().split()
        if not text:
            return None
        return int(float(text[0]))

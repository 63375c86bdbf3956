from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, TypeVar

from gamestate_api.models.host import CounterSample

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OSCounterSource(ABC):
    """Abstract base for platform counter readers.

    Subclasses implement one reader per counter group. ``read()`` calls each
    of them independently, so a group that fails only blanks its own fields.
    """

    name: str = "base"

    # ── abstract methods ────────────────────────────────

    @abstractmethod
    def read_cpu(self) -> tuple[float, float] | None:
        """Return cumulative ``(idle, total)`` CPU ticks."""
        ...

    @abstractmethod
    def read_memory(self) -> tuple[int, int | None] | None:
        """Return ``(total, available)`` physical memory in bytes."""
        ...

    @abstractmethod
    def read_uptime(self) -> int | None:
        """Return host uptime in whole seconds."""
        ...

    # ── sampling ────────────────────────────────────────

    def read(self) -> CounterSample:
        cpu = self._guarded("cpu", self.read_cpu)
        memory = self._guarded("memory", self.read_memory)
        uptime = self._guarded("uptime", self.read_uptime)

        idle, total = cpu if cpu is not None else (None, None)
        mem_total, mem_available = memory if memory is not None else (None, None)
        return CounterSample(
            idle_ticks=idle,
            total_ticks=total,
            total_memory=mem_total,
            available_memory=mem_available,
            uptime_seconds=uptime,
        )

    def _guarded(self, group: str, reader: Callable[[], T | None]) -> T | None:
        try:
            return reader()
        except Exception:
            logger.debug("Counter source [%s] could not read %s counters", self.name, group, exc_info=True)
            return None

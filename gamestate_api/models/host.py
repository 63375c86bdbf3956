from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field


class CounterSample(BaseModel):
    """Raw OS counters read at one point in time.

    Any counter the source could not read is left as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    idle_ticks: float | None = None
    total_ticks: float | None = None
    total_memory: int | None = None
    available_memory: int | None = None
    uptime_seconds: int | None = None
    timestamp: float = Field(default_factory=time.time)

    @property
    def has_cpu(self) -> bool:
        return self.idle_ticks is not None and self.total_ticks is not None


class UtilizationState(BaseModel):
    """Baseline and running peaks kept between samples."""

    previous: CounterSample | None = None
    peak_cpu: float = 0.0
    peak_memory: int = 0


class HostSnapshot(BaseModel):
    """Body of ``GET /api/host``."""

    uptime_seconds: int = 0
    current_cpu: float = 0.0
    max_cpu: float = 0.0
    total_mem: int = 0
    current_mem: int = 0
    max_mem: int = 0
    timestamp: int = Field(default_factory=lambda: int(time.time()))

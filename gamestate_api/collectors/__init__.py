from .base import OSCounterSource
from .host_sampler import ResourceSampler, default_counter_source
from .proc_source import ProcCounterSource
from .psutil_source import PsutilCounterSource

__all__ = [
    "OSCounterSource",
    "ProcCounterSource",
    "PsutilCounterSource",
    "ResourceSampler",
    "default_counter_source",
]

from .host import CounterSample, HostSnapshot, UtilizationState
from .player import PlayerRecord

__all__ = [
    "CounterSample",
    "HostSnapshot",
    "UtilizationState",
    "PlayerRecord",
]

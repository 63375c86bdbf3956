from __future__ import annotations

import pytest

from gamestate_api.collectors.base import OSCounterSource
from gamestate_api.collectors.host_sampler import ResourceSampler
from gamestate_api.models.player import PlayerRecord
from gamestate_api.world.memory import InMemoryGameState


class ScriptedCounterSource(OSCounterSource):
    """Counter source that replays a fixed list of readings.

    Each entry is ``(idle, total, mem_total, mem_available)``; ``None`` in a
    slot makes that counter group unreadable. The last entry repeats.
    """

    name = "scripted"

    def __init__(self, readings: list[tuple], uptime: int = 3600) -> None:
        self.readings = list(readings)
        self.uptime = uptime
        self.calls = 0
        self._current: tuple = readings[0]

    def read(self):
        index = min(self.calls, len(self.readings) - 1)
        self._current = self.readings[index]
        self.calls += 1
        return super().read()

    def read_cpu(self):
        idle, total = self._current[0], self._current[1]
        if idle is None or total is None:
            raise OSError("cpu counters unavailable")
        return float(idle), float(total)

    def read_memory(self):
        mem_total, mem_available = self._current[2], self._current[3]
        if mem_total is None:
            raise OSError("memory counters unavailable")
        return mem_total, mem_available

    def read_uptime(self):
        return self.uptime


GIB = 1024**3


@pytest.fixture
def scripted_source() -> ScriptedCounterSource:
    return ScriptedCounterSource(
        [
            (800, 1000, 8 * GIB, 6 * GIB),
            (850, 1100, 8 * GIB, 5 * GIB),
            (900, 1300, 8 * GIB, 7 * GIB),
        ]
    )


@pytest.fixture
def sampler(scripted_source: ScriptedCounterSource) -> ResourceSampler:
    return ResourceSampler(scripted_source)


def make_player(name: str, online: bool = True) -> PlayerRecord:
    return PlayerRecord(
        name=name,
        level=60,
        race="Orc",
        class_name="Warrior",
        zone="Orgrimmar",
        online=online,
        stats={"strength": 300, "stamina": 280},
        equipment=[{"slot": "main_hand", "item_id": 19019, "name": "Thunderfury"}],
        skills=[{"id": 43, "name": "Swords", "value": 300, "max": 300, "category": "weapon"}],
        quests=[{"id": 7786, "title": "Thunderaan the Windseeker", "status": "complete"}],
    )


@pytest.fixture
def game_state() -> InMemoryGameState:
    state = InMemoryGameState(realm_name="Test Realm")
    state.add_player(make_player("Thrall"))
    state.add_player(make_player("Garrosh"))
    state.add_player(make_player("Alice", online=False))
    return state


@pytest.fixture
def player_factory():
    return make_player

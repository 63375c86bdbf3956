from __future__ import annotations

from gamestate_api.models.player import PlayerRecord
from gamestate_api.world.memory import InMemoryGameState


def demo_game_state() -> InMemoryGameState:
    """A small realm with two online players, for local runs."""
    state = InMemoryGameState(realm_name="Demo Realm")
    state.add_player(
        PlayerRecord(
            name="Alice",
            level=80,
            race="Human",
            class_name="Paladin",
            zone="Stormwind City",
            stats={"strength": 412, "agility": 120, "stamina": 530, "intellect": 210, "spirit": 180},
            equipment=[
                {"slot": "head", "item_id": 40576, "name": "Valorous Redemption Headpiece"},
                {"slot": "main_hand", "item_id": 40395, "name": "Torch of Holy Fire"},
            ],
            skills=[
                {"id": 43, "name": "Swords", "value": 400, "max": 400},
                {"id": 129, "name": "First Aid", "value": 375, "max": 450},
            ],
            quests=[{"id": 12593, "title": "In Service of the Light", "status": "incomplete"}],
        )
    )
    state.add_player(
        PlayerRecord(
            name="Borin",
            level=72,
            race="Dwarf",
            class_name="Hunter",
            zone="Howling Fjord",
            stats={"strength": 150, "agility": 640, "stamina": 470, "intellect": 160, "spirit": 140},
            equipment=[{"slot": "ranged", "item_id": 37191, "name": "Drake-Mounted Crossbow"}],
            skills=[{"id": 226, "name": "Crossbows", "value": 360, "max": 360}],
            quests=[],
        )
    )
    return state

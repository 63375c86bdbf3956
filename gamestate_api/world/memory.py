from __future__ import annotations

import logging
import threading
import time

from gamestate_api.models.player import PlayerRecord

logger = logging.getLogger(__name__)


class InMemoryGameState:
    """Thread-safe player registry backed by a dict.

    Implements ``GameStateProvider`` for the demo runner and tests. Name
    lookups are case-insensitive, like the game's own character lookup.
    """

    def __init__(self, realm_name: str = "Local Realm", max_players: int = 100) -> None:
        self.realm_name = realm_name
        self.max_players = max_players
        self._players: dict[str, PlayerRecord] = {}
        self._lock = threading.Lock()
        self._started_at = time.monotonic()

    # ── registry ────────────────────────────────────────

    def add_player(self, player: PlayerRecord) -> None:
        with self._lock:
            self._players[player.name.lower()] = player
        logger.debug("Player %s added", player.name)

    def remove_player(self, name: str) -> bool:
        with self._lock:
            return self._players.pop(name.lower(), None) is not None

    def set_online(self, name: str, online: bool) -> bool:
        with self._lock:
            player = self._players.get(name.lower())
            if player is None:
                return False
            self._players[name.lower()] = player.model_copy(update={"online": online})
            return True

    def online_players(self) -> list[PlayerRecord]:
        with self._lock:
            return [p for p in self._players.values() if p.online]

    # ── GameStateProvider ───────────────────────────────

    def find_player_by_name(self, name: str) -> PlayerRecord | None:
        with self._lock:
            return self._players.get(name.lower())

    def is_in_world(self, player: PlayerRecord) -> bool:
        return player.online

    def get_uptime_seconds(self) -> int:
        return int(time.monotonic() - self._started_at)

    def get_server_data(self) -> dict:
        return {
            "realm": self.realm_name,
            "uptime_seconds": self.get_uptime_seconds(),
            "players_online": len(self.online_players()),
            "max_players": self.max_players,
        }

    def get_all_players_data(self, include_equipment: bool) -> list[dict]:
        return [self.get_player_data(p, include_equipment) for p in self.online_players()]

    def get_player_data(self, player: PlayerRecord, include_equipment: bool) -> dict:
        data = {
            "name": player.name,
            "level": player.level,
            "race": player.race,
            "class": player.class_name,
            "zone": player.zone,
        }
        if include_equipment:
            data["equipment"] = list(player.equipment)
        return data

    def get_player_stats(self, player: PlayerRecord) -> dict:
        return {"name": player.name, "stats": dict(player.stats)}

    def get_player_equipment(self, player: PlayerRecord) -> dict:
        return {"name": player.name, "equipment": list(player.equipment)}

    def get_player_skills(self, player: PlayerRecord) -> dict:
        summary = [{"id": s.get("id"), "name": s.get("name"), "value": s.get("value")} for s in player.skills]
        return {"name": player.name, "skills": summary}

    def get_player_skills_full(self, player: PlayerRecord) -> dict:
        return {"name": player.name, "skills": [dict(s) for s in player.skills]}

    def get_player_quests(self, player: PlayerRecord) -> dict:
        return {"name": player.name, "quests": [dict(q) for q in player.quests]}

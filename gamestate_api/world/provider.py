from __future__ import annotations

from typing import Any, Protocol


class GameStateProvider(Protocol):
    """What the API needs from the embedding game server.

    Every ``get_*`` method returns a JSON-serializable structure that is sent
    to the client as-is. ``player`` is whatever object
    ``find_player_by_name`` hands back; the API never looks inside it.
    """

    def find_player_by_name(self, name: str) -> Any | None: ...

    def is_in_world(self, player: Any) -> bool: ...

    def get_uptime_seconds(self) -> int: ...

    def get_server_data(self) -> dict: ...

    def get_all_players_data(self, include_equipment: bool) -> list[dict]: ...

    def get_player_data(self, player: Any, include_equipment: bool) -> dict: ...

    def get_player_stats(self, player: Any) -> dict: ...

    def get_player_equipment(self, player: Any) -> dict: ...

    def get_player_skills(self, player: Any) -> dict: ...

    def get_player_skills_full(self, player: Any) -> dict: ...

    def get_player_quests(self, player: Any) -> dict: ...

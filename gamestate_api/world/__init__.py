from .demo import demo_game_state
from .memory import InMemoryGameState
from .provider import GameStateProvider

__all__ = [
    "GameStateProvider",
    "InMemoryGameState",
    "demo_game_state",
]

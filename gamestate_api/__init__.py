"""In-process HTTP status API for a running game server."""

from .main import create_app
from .server import GameStateServer, ServerState

__all__ = [
    "GameStateServer",
    "ServerState",
    "create_app",
]

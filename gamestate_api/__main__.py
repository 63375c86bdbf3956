"""Run the game state API against a demo realm: ``python -m gamestate_api``."""

from __future__ import annotations

import logging
import sys
import time

from gamestate_api.collectors.host_sampler import ResourceSampler, default_counter_source
from gamestate_api.config import settings
from gamestate_api.server import GameStateServer
from gamestate_api.world.demo import demo_game_state

logger = logging.getLogger("gamestate_api")


def main() -> int:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    server = GameStateServer(
        demo_game_state(),
        host=settings.host,
        port=settings.port,
        allowed_origin=settings.allowed_origin,
        sampler=ResourceSampler(default_counter_source(settings.counter_source)),
    )
    if not server.start():
        return 1

    try:
        while server.is_running:
            time.sleep(1.0)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        server.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())

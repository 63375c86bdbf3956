from __future__ import annotations

import logging
import socket
import threading
from enum import StrEnum

import uvicorn

from gamestate_api.collectors.host_sampler import ResourceSampler
from gamestate_api.config import settings
from gamestate_api.main import create_app
from gamestate_api.world.provider import GameStateProvider

logger = logging.getLogger(__name__)


class ServerState(StrEnum):
    STOPPED = "stopped"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"


class _NotifyingServer(uvicorn.Server):
    """uvicorn server that fires ``ready`` once startup has finished."""

    def __init__(self, config: uvicorn.Config, ready: threading.Event) -> None:
        super().__init__(config)
        self._ready = ready

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        try:
            await super().startup(sockets=sockets)
        finally:
            self._ready.set()


def _serve(server: _NotifyingServer, sock: socket.socket, ready: threading.Event) -> None:
    # Module-level so the worker thread holds no reference to the controller.
    try:
        server.run(sockets=[sock])
    except Exception:
        logger.exception("Game state API server loop crashed")
    finally:
        ready.set()


class GameStateServer:
    """Runs the game state API on a background thread inside the host process.

    ``start()`` and ``stop()`` never raise; failures are logged and reported
    through the return value of ``start()`` and ``is_running``. Dropping the
    last reference to a running server stops it.
    """

    def __init__(
        self,
        provider: GameStateProvider,
        host: str | None = None,
        port: int | None = None,
        allowed_origin: str | None = None,
        sampler: ResourceSampler | None = None,
        startup_timeout: float | None = None,
    ) -> None:
        self.host = host if host is not None else settings.host
        self.port = port if port is not None else settings.port
        self.allowed_origin = allowed_origin if allowed_origin is not None else settings.allowed_origin
        self.startup_timeout = startup_timeout if startup_timeout is not None else settings.startup_timeout
        self.app = create_app(provider, sampler=sampler, allowed_origin=self.allowed_origin)

        self._lifecycle = threading.Lock()
        self._state = ServerState.STOPPED
        self._server: _NotifyingServer | None = None
        self._socket: socket.socket | None = None
        self._thread: threading.Thread | None = None
        self._bound_port: int | None = None

    # ── lifecycle ────────────────────────────────────────

    def start(self) -> bool:
        if not self._lifecycle.acquire(blocking=False):
            logger.warning("HTTP server is busy starting or stopping")
            return False
        try:
            if self._state is ServerState.RUNNING and not self._loop_alive():
                logger.warning("HTTP server loop exited on its own, cleaning up")
                self._shutdown()
            if self._state is not ServerState.STOPPED:
                logger.warning("HTTP server is already running")
                return False

            self._state = ServerState.STARTING
            logger.info("Starting HTTP server on %s:%d", self.host, self.port)
            try:
                sock = self._bind()
            except OSError as exc:
                logger.error("Failed to start HTTP server on %s:%d: %s", self.host, self.port, exc)
                self._state = ServerState.STOPPED
                return False

            ready = threading.Event()
            server = _NotifyingServer(self._uvicorn_config(), ready)
            thread = threading.Thread(
                target=_serve,
                args=(server, sock, ready),
                name="gamestate-api",
                daemon=True,
            )
            self._server, self._socket, self._thread = server, sock, thread
            self._bound_port = sock.getsockname()[1]
            thread.start()

            if ready.wait(self.startup_timeout) and server.started:
                self._state = ServerState.RUNNING
                logger.info("Game State API HTTP server started successfully on %s:%d", self.host, self._bound_port)
                return True

            logger.error("Failed to start Game State API HTTP server on %s:%d", self.host, self.port)
            self._shutdown()
            return False
        finally:
            self._lifecycle.release()

    def stop(self) -> None:
        with self._lifecycle:
            if self._state is ServerState.STOPPED:
                return
            self._state = ServerState.STOPPING
            logger.info("Stopping HTTP server...")
            self._shutdown()
            logger.info("HTTP server stopped")

    @property
    def state(self) -> ServerState:
        if self._state is ServerState.RUNNING and not self._loop_alive():
            return ServerState.STOPPED
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ServerState.RUNNING and self._loop_alive()

    @property
    def bound_port(self) -> int:
        """Port actually listened on; differs from ``port`` when ``port`` is 0."""
        return self._bound_port if self._bound_port is not None else self.port

    def __enter__(self) -> GameStateServer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __del__(self) -> None:
        if getattr(self, "_lifecycle", None) is not None:
            self.stop()

    # ── internals ───────────────────────────────────────

    def _loop_alive(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def _uvicorn_config(self) -> uvicorn.Config:
        return uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            lifespan="off",
            access_log=False,
            log_config=None,
        )

    def _bind(self) -> socket.socket:
        family = socket.AF_INET6 if ":" in self.host else socket.AF_INET
        sock = socket.socket(family, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
        except OSError:
            sock.close()
            raise
        sock.set_inheritable(True)
        return sock

    def _shutdown(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        if self._socket is not None:
            self._socket.close()

        self._server = None
        self._socket = None
        self._thread = None
        self._bound_port = None
        self._state = ServerState.STOPPED

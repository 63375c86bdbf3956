from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "Game State API"
    log_level: str = "INFO"

    # --- server ---
    host: str = "127.0.0.1"
    port: int = 8080
    allowed_origin: str = "*"
    startup_timeout: float = 5.0  # seconds to wait for the listener to come up

    # --- host sampling ---
    counter_source: str = "auto"  # auto | proc | psutil

    model_config = {"env_file": ".env", "env_prefix": "GAMESTATE_"}


settings = Settings()

from __future__ import annotations

from pydantic import BaseModel, Field


class PlayerRecord(BaseModel):
    """A player as held by the in-memory game state."""

    name: str
    level: int = 1
    race: str = ""
    class_name: str = ""
    zone: str = ""
    online: bool = True
    stats: dict = Field(default_factory=dict)
    equipment: list[dict] = Field(default_factory=list)
    skills: list[dict] = Field(default_factory=list)
    quests: list[dict] = Field(default_factory=list)

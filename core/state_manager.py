"""Persisted workspace state and its file-backed manager."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError, field_validator

logger = logging.getLogger("ws.state")

DEFAULT_BRIGHTNESS = 100
MIN_BRIGHTNESS = 5
MAX_BRIGHTNESS = 250


class WorkspaceState(BaseModel):
    """Previous workspace and per-workspace brightness table."""

    model_config = ConfigDict(populate_by_name=True)

    previous_workspace: int = Field(default=0, alias="Prev")
    brightness: dict[int, int] = Field(default_factory=dict, alias="Brightness")

    _changed: bool = PrivateAttr(default=False)

    @field_validator("brightness", mode="before")
    @classmethod
    def _null_brightness(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def load(cls, blob: str | None) -> WorkspaceState:
        """Parse a JSON blob; empty input gives a fresh state."""
        if not blob or not blob.strip():
            return cls()
        try:
            return cls.model_validate_json(blob)
        except ValidationError as exc:
            raise ValueError(f"failed to unmarshal json for workspace state: {exc}") from exc

    def dump(self) -> str:
        return self.model_dump_json(by_alias=True)

    @property
    def changed(self) -> bool:
        return self._changed

    def mark_changed(self) -> None:
        self._changed = True

    def record_move(self, current: int) -> None:
        self.previous_workspace = current
        self.mark_changed()

    def get_brightness(self, workspace: int) -> int:
        return self.brightness.get(workspace, DEFAULT_BRIGHTNESS)

    def set_brightness(self, workspace: int, value: int) -> None:
        if not MIN_BRIGHTNESS <= value <= MAX_BRIGHTNESS:
            raise ValueError(
                f"brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}, got {value}"
            )
        self.brightness[workspace] = value
        self.mark_changed()

    def offset_brightness(self, workspace: int, delta: int) -> int:
        """Shift a workspace's brightness by `delta`. The result is not clamped."""
        value = self.get_brightness(workspace) + delta
        self.brightness[workspace] = value
        self.mark_changed()
        return value

    def brightness_listing(self) -> list[tuple[int, int]]:
        return sorted(self.brightness.items())


class StateManager:
    """Reads and writes the workspace state file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> WorkspaceState:
        if not self.path.exists():
            logger.debug("No state file at %s, starting fresh", self.path)
            return WorkspaceState()
        return WorkspaceState.load(self.path.read_text(encoding="utf-8"))

    def save(self, state: WorkspaceState) -> bool:
        """Persist state if it changed. Returns whether anything was written."""
        if not state.changed:
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(state.dump() + "\n", encoding="utf-8")
        logger.debug("Saved state to %s", self.path)
        return True

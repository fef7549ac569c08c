"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.policy_runtime import load_effective_config, resolve_state_path
from core.state_manager import StateManager, WorkspaceState
from core.workspace import ToolCommands, WorkspaceController
from executor.command_executor import ShellQuery, WorkspaceQuery


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    state_manager: StateManager
    state: WorkspaceState
    controller: WorkspaceController

    def save(self) -> bool:
        return self.state_manager.save(self.state)


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(
        self,
        root: Path | None = None,
        config_path: Path | None = None,
        state_path: Path | None = None,
        query: WorkspaceQuery | None = None,
    ) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.config_path = config_path
        self.state_path = state_path
        self.query = query

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root, self.config_path)
        state_manager = StateManager(resolve_state_path(config, self.state_path))
        state = state_manager.load()

        query = self.query or ShellQuery(timeout=config.get("query_timeout"))
        controller = WorkspaceController(
            state=state,
            query=query,
            tools=self._tools(config),
            brightness_step=int(config.get("brightness", {}).get("step", 10)),
        )
        return RuntimeBundle(
            config=config,
            state_manager=state_manager,
            state=state,
            controller=controller,
        )

    @staticmethod
    def _tools(config: dict[str, Any]) -> ToolCommands:
        commands_cfg = config.get("commands", {})
        known = ToolCommands.__dataclass_fields__
        return ToolCommands(**{k: str(v) for k, v in commands_cfg.items() if k in known})

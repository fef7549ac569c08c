"""Workspace switching and brightness orchestration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from core.position import resolve
from core.state_manager import WorkspaceState
from executor.command_executor import QueryError, WorkspaceQuery

logger = logging.getLogger("ws.workspace")


@dataclass(frozen=True)
class ToolCommands:
    """Query descriptors and emitted-command templates for the external tools."""

    workspace_count: str = "wmctrl -d | wc | awk '{ print $1 }'"
    current_workspace: str = """wmctrl -d | awk '{ if ($2 == "'*'") print $1 }'"""
    monitors: str = """xrandr --query | grep "\\bconnected" | awk '{print $1}'"""
    switch: str = "wmctrl -s {workspace}"
    brightness: str = "xrandr --output {output} --brightness {fraction}"

    def switch_command(self, workspace: int) -> str:
        return self.switch.format(workspace=workspace)

    def brightness_command(self, output: str, value: int) -> str:
        return self.brightness.format(output=output, fraction=f"{value / 100.0:.2f}")


def clean_monitor_codes(codes: Iterable[str]) -> list[str]:
    """Strip output identifiers and drop blank entries, keeping order."""
    cleaned = []
    for code in codes:
        code = code.strip()
        if code:
            cleaned.append(code)
    return cleaned


class WorkspaceController:
    """Computes the commands for workspace moves and brightness changes.

    Nothing here executes the emitted commands; callers print them for the
    shell harness. All mutation goes through the supplied `WorkspaceState`.
    """

    def __init__(
        self,
        state: WorkspaceState,
        query: WorkspaceQuery,
        tools: ToolCommands | None = None,
        brightness_step: int = 10,
    ) -> None:
        self.state = state
        self.query = query
        self.tools = tools or ToolCommands()
        self.brightness_step = brightness_step

    def workspace_count(self) -> int:
        return self.query.query_int(self.tools.workspace_count)

    def current_workspace(self) -> int:
        return self.query.query_int(self.tools.current_workspace)

    def monitors(self) -> list[str]:
        return clean_monitor_codes(self.query.query_list(self.tools.monitors))

    def move_left(self) -> list[str]:
        return self.move_relative(-1)

    def move_right(self) -> list[str]:
        return self.move_relative(1)

    def move_back(self) -> list[str]:
        return self.move_to(self.state.previous_workspace)

    def move_relative(self, offset: int) -> list[str]:
        total = self.workspace_count()
        current = self.current_workspace()
        return self._move(resolve(total, current, offset), current)

    def move_to(self, workspace: int) -> list[str]:
        # Absolute targets are not checked against the workspace count.
        return self._move(workspace, self.current_workspace())

    def _move(self, target: int, current: int) -> list[str]:
        if target == current:
            logger.debug("Already on workspace %d", current)
            return []
        self.state.record_move(current)
        commands = [self.tools.switch_command(target)]
        commands.extend(self._restore_brightness(target))
        return commands

    def _restore_brightness(self, workspace: int) -> list[str]:
        try:
            monitors = self.monitors()
        except QueryError as exc:
            logger.warning("Skipping brightness restore for workspace %d: %s", workspace, exc)
            return []
        return self.brightness_commands(workspace, monitors)

    def brightness_commands(self, workspace: int, monitors: Iterable[str]) -> list[str]:
        value = self.state.get_brightness(workspace)
        return [
            self.tools.brightness_command(code, value) for code in clean_monitor_codes(monitors)
        ]

    def set_brightness(self, workspace: int, value: int) -> None:
        self.state.set_brightness(workspace, value)

    def brightness_up(self) -> list[str]:
        return self.adjust_brightness(self.brightness_step)

    def brightness_down(self) -> list[str]:
        return self.adjust_brightness(-self.brightness_step)

    def adjust_brightness(self, delta: int) -> list[str]:
        current = self.current_workspace()
        value = self.state.offset_brightness(current, delta)
        logger.info("Workspace %d brightness is now %d", current, value)
        return self._restore_brightness(current)

    def list_brightness(self) -> list[tuple[int, int]]:
        return self.state.brightness_listing()

    def list_monitors(self) -> list[str]:
        return sorted(self.monitors())

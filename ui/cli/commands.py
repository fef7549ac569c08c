"""Typer command handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.workspace import WorkspaceController
from executor.command_executor import QueryError, WorkspaceQuery

logger = logging.getLogger("ws.cli")


@dataclass
class CLIOptions:
    """Options shared by every command, stored on the Typer context."""

    state_file: Path | None = None
    config: Path | None = None
    verbose: bool = False
    query: WorkspaceQuery | None = None


def configure_logging(verbose: bool, config: dict[str, Any]) -> None:
    level_name = "DEBUG" if verbose else str(config.get("logging", {}).get("level", "WARNING"))
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def _runtime(options: CLIOptions) -> RuntimeBundle:
    try:
        bundle = Orchestrator(
            config_path=options.config,
            state_path=options.state_file,
            query=options.query,
        ).build()
    except ValueError as exc:
        raise _fail(str(exc)) from exc
    configure_logging(options.verbose, bundle.config)
    return bundle


def _execute(options: CLIOptions, action: Callable[[WorkspaceController], list[str] | None]) -> None:
    """Run a controller action, print what it emits and persist changed state."""
    bundle = _runtime(options)
    try:
        emitted = action(bundle.controller) or []
    except (QueryError, ValueError) as exc:
        logger.debug("Command failed", exc_info=True)
        raise _fail(str(exc)) from exc
    for line in emitted:
        typer.echo(line)
    if bundle.save():
        logger.debug("State persisted to %s", bundle.state_manager.path)


def move_left(options: CLIOptions) -> None:
    _execute(options, lambda c: c.move_left())


def move_right(options: CLIOptions) -> None:
    _execute(options, lambda c: c.move_right())


def move_back(options: CLIOptions) -> None:
    _execute(options, lambda c: c.move_back())


def move_to(options: CLIOptions, workspace: int) -> None:
    _execute(options, lambda c: c.move_to(workspace))


def brightness_set(options: CLIOptions, workspace: int, value: int) -> None:
    _execute(options, lambda c: c.set_brightness(workspace, value))


def brightness_up(options: CLIOptions) -> None:
    _execute(options, lambda c: c.brightness_up())


def brightness_down(options: CLIOptions) -> None:
    _execute(options, lambda c: c.brightness_down())


def brightness_list(options: CLIOptions) -> None:
    _execute(options, lambda c: [f"{ws:2d}: {value}" for ws, value in c.list_brightness()])


def monitors_list(options: CLIOptions) -> None:
    _execute(options, lambda c: c.list_monitors())


def state_show(options: CLIOptions) -> None:
    _execute(options, lambda c: [c.state.dump()])

"""CLI entrypoint for wsctl."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
import typer
from typer.core import TyperGroup

from ui.cli import commands
from ui.cli.commands import CLIOptions


class WorkspaceGroup(TyperGroup):
    """Treats a bare non-negative integer in command position as `goto N`."""

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and args[0].isdigit():
            return "goto", self.get_command(ctx, "goto"), args
        return super().resolve_command(ctx, args)


app = typer.Typer(cls=WorkspaceGroup, help="Workspace switching with per-workspace brightness")
brightness_app = typer.Typer(help="Per-workspace brightness commands")
monitors_app = typer.Typer(help="Monitor commands")
state_app = typer.Typer(help="Persisted state commands")


def _options(ctx: typer.Context) -> CLIOptions:
    return ctx.ensure_object(CLIOptions)


@app.callback()
def main_callback(
    ctx: typer.Context,
    state_file: Optional[Path] = typer.Option(
        None, "--state-file", help="JSON state file (default from WSCTL_STATE_FILE or config)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="User config YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    options = _options(ctx)
    if state_file is not None:
        options.state_file = state_file
    if config is not None:
        options.config = config
    options.verbose = options.verbose or verbose


@app.command("left")
def left_cmd(ctx: typer.Context) -> None:
    """Move one workspace left."""
    commands.move_left(_options(ctx))


@app.command("right")
def right_cmd(ctx: typer.Context) -> None:
    """Move one workspace right."""
    commands.move_right(_options(ctx))


@app.command("back")
def back_cmd(ctx: typer.Context) -> None:
    """Move to the previous workspace."""
    commands.move_back(_options(ctx))


@app.command("goto")
def goto_cmd(
    ctx: typer.Context,
    workspace: int = typer.Argument(..., min=0, help="Workspace number"),
) -> None:
    """Move to a specific workspace (also available as `wsctl N`)."""
    commands.move_to(_options(ctx), workspace)


@brightness_app.command("set")
def brightness_set_cmd(
    ctx: typer.Context,
    workspace: int = typer.Argument(..., min=0, help="Workspace number"),
    value: int = typer.Argument(..., min=5, max=250, help="Monitor brightness percent"),
) -> None:
    """Set the brightness for a workspace."""
    commands.brightness_set(_options(ctx), workspace, value)


@brightness_app.command("up")
def brightness_up_cmd(ctx: typer.Context) -> None:
    """Raise the current workspace's brightness."""
    commands.brightness_up(_options(ctx))


@brightness_app.command("down")
def brightness_down_cmd(ctx: typer.Context) -> None:
    """Lower the current workspace's brightness."""
    commands.brightness_down(_options(ctx))


@brightness_app.command("list")
def brightness_list_cmd(ctx: typer.Context) -> None:
    """List brightnesses for each workspace."""
    commands.brightness_list(_options(ctx))


@monitors_app.command("list")
def monitors_list_cmd(ctx: typer.Context) -> None:
    """List monitor codes."""
    commands.monitors_list(_options(ctx))


@state_app.command("show")
def state_show_cmd(ctx: typer.Context) -> None:
    """Print the persisted state JSON."""
    commands.state_show(_options(ctx))


app.add_typer(brightness_app, name="brightness")
app.add_typer(monitors_app, name="monitors")
app.add_typer(state_app, name="state")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()

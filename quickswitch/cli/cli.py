r"""
Goal: Friendly CLI for quickswitch.

- Export `app` (tests import this).
- Show "Quickswitch for i3" in --help output.
- Exactly one of --workspace / --move; anything else is a usage error.
- Fatal errors print `error: ...` and exit 1; a rejected i3 command only warns.
"""

from __future__ import annotations

from typing import Optional

import typer
from loguru import logger

from quickswitch.adapters.i3_ipc import I3Client
from quickswitch.errors import QuickswitchError
from quickswitch.services.logs import configure_logging
from quickswitch.services.switcher import Mode, run
from quickswitch.settings import APP_NAME, DMENU_COMMAND, VERSION

app = typer.Typer(
    help="Quickswitch for i3",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


def _mode(workspace: bool, move: bool) -> Mode:
    if workspace and move:
        raise typer.BadParameter("--workspace and --move are mutually exclusive")
    if workspace:
        return Mode.WORKSPACE
    if move:
        return Mode.MOVE
    raise typer.BadParameter("pass --workspace or --move")


@app.command(help="Quickswitch for i3: pick a window or workspace through dmenu.")
def quickswitch(
    dmenu: str = typer.Option(
        DMENU_COMMAND, "--dmenu", "-d", help="dmenu command to execute"
    ),
    workspace: bool = typer.Option(
        False, "--workspace", "-w", help="Pick a workspace and switch to it"
    ),
    move: bool = typer.Option(
        False, "--move", "-m", help="Pick a window and move it to the current workspace"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logs on stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True
    ),
) -> None:
    mode = _mode(workspace, move)
    configure_logging(verbose)
    logger.debug("dmenu command: {!r}", dmenu)
    try:
        run(I3Client(), mode, dmenu)
    except QuickswitchError as e:
        logger.error("{}: {}", type(e).__name__, e)
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

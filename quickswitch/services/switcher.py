"""
Goal
- One query -> pick -> act cycle against i3:
  - collect_candidates(client, mode) -> {label: target}
  - dispatch(client, mode, mapping, picked) -> command sent, or None
  - run(client, mode, dmenu) -> command sent, or None

Notes
- `client` is anything with scene_graph(), workspaces() and send(); in
  production that's adapters.i3_ipc.I3Client.
- Workspace mode falls back to the raw typed text, so typing a new name
  creates that workspace. Move mode never invents a target.
- A failed final command is logged, never raised.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from loguru import logger

from quickswitch.adapters.picker import pick
from quickswitch.errors import IPCCommandError
from quickswitch.models.schemas import Target, selector
from quickswitch.services.labels import window_labels, workspace_labels
from quickswitch.services.tokenizer import tokenize
from quickswitch.services.tree import collect_windows


class Mode(str, Enum):
    WORKSPACE = "workspace"
    MOVE = "move"


def collect_candidates(client: Any, mode: Mode) -> Dict[str, Target]:
    if mode is Mode.WORKSPACE:
        return workspace_labels(client.workspaces())
    return window_labels(collect_windows(client.scene_graph()))


def build_command(mode: Mode, mapping: Dict[str, Target], picked: str) -> Optional[str]:
    """Map the picker's output back to an i3 command (None means do nothing)."""
    choice = picked.strip()
    if not choice:
        return None
    # labels may carry leading padding, so try the line as printed first
    target = mapping.get(picked.rstrip("\r\n"))
    if target is None:
        target = mapping.get(choice)
    if mode is Mode.WORKSPACE:
        return f"workspace {selector(target) if target is not None else choice}"
    if target is None:
        logger.info("No window matches {!r}; nothing to move", choice)
        return None
    return f"{selector(target)} move workspace current"


def dispatch(
    client: Any, mode: Mode, mapping: Dict[str, Target], picked: str
) -> Optional[str]:
    command = build_command(mode, mapping, picked)
    if command is None:
        return None
    try:
        result = client.send(command)
    except IPCCommandError as exc:
        logger.warning("{}", exc)
        return command
    if result.success:
        logger.info("Sent {!r}", command)
    else:
        logger.warning("i3 rejected {!r}: {}", command, "; ".join(result.errors))
    return command


def run(client: Any, mode: Mode, dmenu: str) -> Optional[str]:
    program, args = tokenize(dmenu)
    mapping = collect_candidates(client, mode)
    logger.debug("{} candidates for {} mode", len(mapping), mode.value)
    picked = pick(program, args, "\n".join(mapping))
    return dispatch(client, mode, mapping, picked)

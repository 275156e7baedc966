"""
Goal: Small i3 IPC helpers: fetch the tree, list workspaces, send a command.
- Convert i3ipc containers into our plain Node model so nothing else imports i3ipc.
- Wrap library/socket errors into our own exception types.
"""

from __future__ import annotations

from typing import Any, List, Optional

import i3ipc
from loguru import logger

from quickswitch.errors import IPCCommandError, IPCQueryError
from quickswitch.models.schemas import CommandResult, Node


def _to_node(con: Any) -> Node:
    """Copy the fields we care about from an i3ipc Con (recursively)."""
    return Node(
        window=getattr(con, "window", None),
        name=getattr(con, "name", None),
        window_class=getattr(con, "window_class", None),
        nodes=[_to_node(child) for child in (getattr(con, "nodes", None) or [])],
    )


class I3Client:
    """Thin wrapper around i3ipc.Connection, connected lazily on first use."""

    def __init__(self, socket_path: Optional[str] = None) -> None:
        self._socket_path = socket_path
        self._conn: Optional[i3ipc.Connection] = None

    def _connection(self) -> i3ipc.Connection:
        if self._conn is None:
            try:
                self._conn = i3ipc.Connection(socket_path=self._socket_path)
            except Exception as exc:  # noqa: BLE001 - i3ipc raises plain Exception
                raise IPCQueryError(f"cannot connect to i3: {exc}") from exc
        return self._conn

    def scene_graph(self) -> List[Node]:
        """Return the root's children of the current tree."""
        conn = self._connection()
        try:
            root = conn.get_tree()
        except Exception as exc:  # noqa: BLE001
            raise IPCQueryError(f"get_tree failed: {exc}") from exc
        return [_to_node(child) for child in root.nodes]

    def workspaces(self) -> List[str]:
        conn = self._connection()
        try:
            replies = conn.get_workspaces()
        except Exception as exc:  # noqa: BLE001
            raise IPCQueryError(f"get_workspaces failed: {exc}") from exc
        return [w.name for w in replies]

    def send(self, command: str) -> CommandResult:
        """Run one i3 command; an unsuccessful reply is returned, not raised."""
        conn = self._connection()
        logger.debug("i3 command: {}", command)
        try:
            replies = conn.command(command)
        except Exception as exc:  # noqa: BLE001
            raise IPCCommandError(f"command {command!r} failed: {exc}") from exc
        errors = [
            str(getattr(r, "error", None) or "unknown error")
            for r in replies
            if not getattr(r, "success", False)
        ]
        return CommandResult(success=not errors, errors=errors)

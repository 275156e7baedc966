"""
Goal: An in-memory stand-in for the i3 client so tests never need a running i3.
"""
from typing import List, Optional

import pytest

from quickswitch.models.schemas import CommandResult, Node


class FakeI3:
    def __init__(self, tree: Optional[List[Node]] = None, workspaces: Optional[List[str]] = None):
        self.tree = tree or []
        self.names = workspaces or []
        self.sent: List[str] = []
        self.reply = CommandResult(success=True)

    def scene_graph(self) -> List[Node]:
        return self.tree

    def workspaces(self) -> List[str]:
        return self.names

    def send(self, command: str) -> CommandResult:
        self.sent.append(command)
        return self.reply


@pytest.fixture
def mail_and_code():
    tree = [
        Node(
            name="eDP-1",
            nodes=[
                Node(window=5, name="Inbox", window_class="Mail"),
                Node(window=9, name="Editor", window_class="Code"),
            ],
        )
    ]
    return FakeI3(tree=tree, workspaces=["1", "2:web"])

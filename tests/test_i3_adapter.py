"""
Goal: The i3 adapter converts i3ipc replies into our models and wraps failures.
i3ipc.Connection is monkeypatched; no socket is opened.
"""
from types import SimpleNamespace as NS

import pytest

from quickswitch.adapters import i3_ipc
from quickswitch.adapters.i3_ipc import I3Client
from quickswitch.errors import IPCCommandError, IPCQueryError
from quickswitch.models.schemas import Node


class FakeConnection:
    def __init__(self, socket_path=None):
        self.commands = []

    def get_tree(self):
        term = NS(window=11, name="vim", window_class="URxvt", nodes=[])
        split = NS(window=None, name=None, window_class=None, nodes=[term])
        return NS(window=None, name="root", window_class=None, nodes=[split])

    def get_workspaces(self):
        return [NS(name="1"), NS(name="2:web")]

    def command(self, text):
        self.commands.append(text)
        if text.startswith("bad"):
            return [NS(success=False, error="Unknown command")]
        return [NS(success=True, error=None)]


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(i3_ipc.i3ipc, "Connection", FakeConnection)
    return I3Client()


def test_scene_graph_returns_root_children(client):
    assert client.scene_graph() == [
        Node(nodes=[Node(window=11, name="vim", window_class="URxvt")])
    ]


def test_workspace_names(client):
    assert client.workspaces() == ["1", "2:web"]


def test_send_success(client):
    result = client.send("workspace 1")
    assert result.success and result.errors == []


def test_send_rejected(client):
    result = client.send("bad thing")
    assert not result.success
    assert result.errors == ["Unknown command"]


def test_connect_failure_is_query_error(monkeypatch):
    def refuse(socket_path=None):
        raise Exception("Failed to retrieve the i3 or sway IPC socket path")

    monkeypatch.setattr(i3_ipc.i3ipc, "Connection", refuse)
    with pytest.raises(IPCQueryError):
        I3Client().scene_graph()


def test_tree_failure_is_query_error(client, monkeypatch):
    def broken(self):
        raise ConnectionResetError("gone")

    monkeypatch.setattr(FakeConnection, "get_tree", broken)
    with pytest.raises(IPCQueryError):
        client.scene_graph()


def test_command_transport_failure(client, monkeypatch):
    def broken(self, text):
        raise BrokenPipeError("gone")

    monkeypatch.setattr(FakeConnection, "command", broken)
    with pytest.raises(IPCCommandError):
        client.send("workspace 1")

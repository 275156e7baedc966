"""
Goal: Turn the i3 tree into the list of windows worth offering to the user.
Only leaves count; containers are expanded, never emitted.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from quickswitch.models.schemas import Node, Window
from quickswitch.settings import IGNORE_WINDOW_CLASSES, IGNORE_WINDOW_NAMES


def iter_leaves(nodes: Iterable[Node]) -> Iterator[Node]:
    """Depth-first, left-to-right leaves, using an explicit stack."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        if node.nodes:
            stack.extend(reversed(node.nodes))
        else:
            yield node


def is_app_window(node: Node) -> bool:
    # no window id -> layout container, not an X window
    if node.window is None:
        return False
    if node.name is None or node.name in IGNORE_WINDOW_NAMES:
        return False
    if node.window_class is not None and node.window_class in IGNORE_WINDOW_CLASSES:
        return False
    return True


def collect_windows(nodes: Iterable[Node]) -> List[Window]:
    windows: List[Window] = []
    for leaf in iter_leaves(nodes):
        if not is_app_window(leaf) or leaf.name is None or leaf.window is None:
            continue
        windows.append(
            Window(id=leaf.window, name=leaf.name, class_name=leaf.window_class)
        )
    return windows

"""
Goal: Build the lines shown in the picker and remember which target each one means.
Window lines are "<class padded to a shared column><title>" so titles line up.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from loguru import logger

from quickswitch.models.schemas import Target, Window, Workspace
from quickswitch.settings import CLASS_PADDING


def class_column_width(windows: Iterable[Window]) -> int:
    widths = [len(w.class_name or "") for w in windows]
    return max(widths, default=0) + CLASS_PADDING


def window_label(window: Window, width: int) -> str:
    return (window.class_name or "").ljust(width) + window.name


def window_labels(windows: List[Window]) -> Dict[str, Target]:
    width = class_column_width(windows)
    mapping: Dict[str, Target] = {}
    for w in windows:
        label = window_label(w, width)
        # same class and title twice: keep both pickable
        while label in mapping:
            logger.debug("Duplicate label {!r}, suffixing window id {}", label, w.id)
            label = f"{label} ({w.id})"
        mapping[label] = w
    return mapping


def workspace_labels(names: Iterable[str]) -> Dict[str, Target]:
    return {name: Workspace(name=name) for name in names}

"""
Goal: Pydantic models for the shapes crossing our boundaries.
- Node / CommandResult: what the window manager gives us back.
- Window / Workspace: the two things a user can pick, unified as Target.
We keep them boring on purpose so they're stable contracts.
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class Node(BaseModel):
    """One container of the i3 tree. Leaves with a `window` id are real X windows."""

    window: Optional[int] = None
    name: Optional[str] = None
    window_class: Optional[str] = None
    nodes: List["Node"] = []


Node.model_rebuild()


class CommandResult(BaseModel):
    success: bool
    errors: List[str] = []


class Window(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["window"] = "window"
    id: int
    name: str
    class_name: Optional[str] = None


class Workspace(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["workspace"] = "workspace"
    name: str


Target = Union[Window, Workspace]


def selector(target: Target) -> str:
    """Render a target the way i3 expects it inside a command."""
    if isinstance(target, Window):
        return f'[id="{target.id}"]'
    return target.name

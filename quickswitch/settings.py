"""
Goal: Centralized configuration for quickswitch (picker command, log location, filters).
Everything comes from the environment; there is no config file.
"""

import os
from pathlib import Path

APP_NAME = "quickswitch"
VERSION = "0.1.0"


def _state_home() -> Path:
    """XDG state dir, with the usual ~/.local/state fallback."""
    raw = os.getenv("XDG_STATE_HOME", "").strip()
    return Path(raw) if raw else Path.home() / ".local" / "state"


def _log_level(raw: str, default: str) -> str:
    """Accept only level names loguru knows about."""
    level = raw.strip().upper()
    if level in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
        return level
    return default


# Picker invocation used when --dmenu is not given
DEFAULT_DMENU_COMMAND = "dmenu -b -i -l 20"
DMENU_COMMAND = os.getenv("QUICKSWITCH_DMENU") or DEFAULT_DMENU_COMMAND

LOG_DIR = Path(os.getenv("QUICKSWITCH_LOG_DIR") or _state_home() / APP_NAME / "logs")
LOG_LEVEL = _log_level(os.getenv("QUICKSWITCH_LOG_LEVEL", "WARNING"), "WARNING")

# Internal i3 pseudo-windows and non-application classes
IGNORE_WINDOW_NAMES = ("__i3_scratch",)
IGNORE_WINDOW_CLASSES = ("i3bar",)

# Extra columns between the class column and the window title
CLASS_PADDING = 5

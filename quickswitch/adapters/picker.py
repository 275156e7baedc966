"""
Goal: Run the external picker (dmenu, rofi -dmenu, fzf, ...) as a line filter.
- Feed it one candidate per line on stdin, then close stdin.
- Read its whole stdout and hand it back untouched (the caller trims).
"""

from __future__ import annotations

import subprocess
from typing import List

from loguru import logger

from quickswitch.errors import PickerIOError, PickerSpawnError


def pick(program: str, args: List[str], candidates: str) -> str:
    """Spawn `program args...`, write `candidates`, return what it printed."""
    logger.debug("picker: {} | {}", program, args)
    try:
        proc = subprocess.Popen(
            [program, *args],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise PickerSpawnError(f"cannot start picker {program!r}: {exc}") from exc

    # communicate() writes and drains concurrently, so a big list can't deadlock
    try:
        out, _ = proc.communicate(candidates)
    except OSError as exc:
        proc.kill()
        proc.wait()
        raise PickerIOError(f"picker {program!r} pipe error: {exc}") from exc

    logger.debug("picker exited with {}", proc.returncode)
    return out or ""

"""
Goal: Split a picker invocation string ("rofi -dmenu -p 'go to'") into program + args.

Rules
- An unquoted space ends a token. Two spaces in a row give an empty argument,
  but spaces before the first token and after the last one are ignored.
- ' or " opens a quoted span that only the same character closes; inside it
  everything is literal, including the other quote character.
- Outside quotes, a backslash makes the next character literal. A dangling
  backslash at the very end is kept as-is.
- An unterminated quote is tolerated: whatever was collected is still emitted.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from loguru import logger

from quickswitch.errors import EmptyCommandError

_QUOTES = ("'", '"')


def tokenize(command: str) -> Tuple[str, List[str]]:
    tokens: List[str] = []
    buf: List[str] = []
    quote: Optional[str] = None
    escaped = False
    # current token has content or a (possibly empty) quoted span
    started = False
    # empty tokens seen between separators, emitted only if another token follows
    pending = 0

    for ch in command:
        if quote is None and not escaped and ch == " ":
            if started:
                tokens.append("".join(buf))
                buf = []
                started = False
            elif tokens:
                pending += 1
            continue

        if not started:
            tokens.extend([""] * pending)
            pending = 0
            started = True

        if escaped:
            buf.append(ch)
            escaped = False
        elif quote is not None:
            if ch == quote:
                quote = None
            else:
                buf.append(ch)
        elif ch in _QUOTES:
            quote = ch
        elif ch == "\\":
            escaped = True
        else:
            buf.append(ch)

    if escaped:
        buf.append("\\")
    if quote is not None:
        logger.warning("Unterminated {} quote in picker command {!r}", quote, command)
    if started:
        tokens.append("".join(buf))

    if not tokens or not tokens[0]:
        raise EmptyCommandError(f"no program name in picker command {command!r}")
    return tokens[0], tokens[1:]

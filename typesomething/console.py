"""Terminal control helpers built on ANSI escape sequences."""

from __future__ import annotations

import shutil
import sys
import time
from enum import IntEnum
from typing import TextIO


class Color(IntEnum):
    """The sixteen classic console colours."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    SKYBLUE = 3
    RED = 4
    VIOLET = 5
    YELLOW = 6
    LIGHT_GRAY = 7
    GRAY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    MINT = 11
    LIGHT_RED = 12
    LIGHT_VIOLET = 13
    LIGHT_YELLOW = 14
    WHITE = 15


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _ansi_parts(color: Color) -> tuple[int, bool]:
    """Map a console colour (blue=1, green=2, red=4) to an ANSI index (red=1, blue=4)."""
    value = int(color)
    index = ((value & 1) << 2) | (value & 2) | ((value & 4) >> 2)
    return index, bool(value & 8)


def gotoxy(x: int, y: int, stream: TextIO | None = None) -> None:
    """Move the cursor to column x, row y (both zero based)."""
    out = _out(stream)
    out.write(f"\x1b[{y + 1};{x + 1}H")
    out.flush()


def set_color(
    text: Color = Color.WHITE,
    background: Color = Color.BLACK,
    stream: TextIO | None = None,
) -> None:
    """Set the text and background colour of what is written next."""
    fg_index, fg_bright = _ansi_parts(Color(text))
    bg_index, bg_bright = _ansi_parts(Color(background))
    fg = (90 if fg_bright else 30) + fg_index
    bg = (100 if bg_bright else 40) + bg_index
    _out(stream).write(f"\x1b[{fg};{bg}m")


def set_cursor_visible(visible: bool, stream: TextIO | None = None) -> None:
    """Show or hide the cursor."""
    _out(stream).write("\x1b[?25h" if visible else "\x1b[?25l")


def set_title(title: str, stream: TextIO | None = None) -> None:
    """Set the terminal window title."""
    _out(stream).write(f"\x1b]0;{title}\x07")


def console_resolution() -> tuple[int, int]:
    """Return the visible terminal size as (columns, rows)."""
    size = shutil.get_terminal_size()
    return size.columns, size.lines


def frame_sync(frame: int) -> float:
    """Wait until more than one frame at `frame` frames per second has passed.

    Returns the time waited, in seconds.
    """
    if frame <= 0:
        raise ValueError("frame rate must be positive")
    interval_ms = 1000 // frame
    start = time.monotonic()
    while True:
        elapsed = time.monotonic() - start
        if elapsed * 1000 > interval_ms:
            return elapsed
        time.sleep(0.0005)
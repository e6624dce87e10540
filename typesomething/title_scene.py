"""The title screen: scrolling banner and a three-item menu."""

from __future__ import annotations

import sys
from typing import TextIO

from typesomething.console import gotoxy
from typesomething.enums import Scene

TITLE = (
    "████████╗██╗   ██╗██████╗ ███████╗    ███████╗ ██████╗ ███╗   ███╗███████╗████████╗██╗  ██╗██╗███╗   ██╗ ██████╗     ",
    "╚══██╔══╝╚██╗ ██╔╝██╔══██╗██╔════╝    ██╔════╝██╔═══██╗████╗ ████║██╔════╝╚══██╔══╝██║  ██║██║████╗  ██║██╔════╝     ",
    "   ██║    ╚████╔╝ ██████╔╝█████╗      ███████╗██║   ██║██╔████╔██║█████╗     ██║   ███████║██║██╔██╗ ██║██║  ███╗    ",
    "   ██║     ╚██╔╝  ██╔═══╝ ██╔══╝      ╚════██║██║   ██║██║╚██╔╝██║██╔══╝     ██║   ██╔══██║██║██║╚██╗██║██║   ██║    ",
    "   ██║      ██║   ██║     ███████╗    ███████║╚██████╔╝██║ ╚═╝ ██║███████╗   ██║   ██║  ██║██║██║ ╚████║╚██████╔╝    ",
    "   ╚═╝      ╚═╝   ╚═╝     ╚══════╝    ╚══════╝ ╚═════╝ ╚═╝     ╚═╝╚══════╝   ╚═╝   ╚═╝  ╚═╝╚═╝╚═╝  ╚═══╝ ╚═════╝     ",
)
MENUS = ("게임 시작", "게임 설정", "나가기")
_MENU_TARGETS = (Scene.GAME, Scene.END, Scene.QUIT)
_TITLE_WINDOW = 100
_MENU_X = 37


def _c_mod(value: int, divisor: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


class TitleScene:
    """Title screen state: banner scroll offset and menu selection."""

    def __init__(self) -> None:
        self.title_lines = list(TITLE)
        self.scroll_bar_width = 100
        self.menu_y_start = 20
        self.init()

    def init(self) -> None:
        """Reset the banner scroll, the menu selection and the held-key memory."""
        self.title_scroll_x = 0
        self.selected_index = 0
        self._up_prev = False
        self._down_prev = False
        self._enter_prev = False

    def update(self, up: bool, down: bool, enter: bool, current_scene: Scene) -> Scene:
        """Advance one frame with the given key states and return the next scene.

        Only a key that was not held on the previous frame takes effect.
        """
        menu_count = len(MENUS)
        if up and not self._up_prev:
            self.selected_index = (self.selected_index + menu_count - 1) % menu_count
        if down and not self._down_prev:
            self.selected_index = (self.selected_index + 1) % menu_count

        next_scene = current_scene
        if enter and not self._enter_prev:
            next_scene = _MENU_TARGETS[self.selected_index]

        self._up_prev, self._down_prev, self._enter_prev = up, down, enter
        self.title_scroll_x = (self.title_scroll_x + 2) % len(self.title_lines[0])
        return next_scene

    def render(self, stream: TextIO | None = None) -> None:
        """Draw the scroll bars, banner and menu."""
        out = sys.stdout if stream is None else stream
        gotoxy(0, 0, out)
        self._render_scroll_bars(out)
        self._render_title(out)
        self._render_menu(out)
        out.flush()

    def _render_title(self, out: TextIO) -> None:
        for row, line in enumerate(self.title_lines):
            gotoxy(0, row + 2, out)
            n = len(line)
            out.write("".join(line[(self.title_scroll_x + col) % n] for col in range(_TITLE_WINDOW)))

    def _render_menu(self, out: TextIO) -> None:
        for i, label in enumerate(MENUS):
            gotoxy(_MENU_X, self.menu_y_start + i * 2, out)
            prefix = ">  " if i == self.selected_index else "  "
            out.write(prefix + label)

    def _render_scroll_bars(self, out: TextIO) -> None:
        gotoxy(0, 0, out)
        out.write(
            "".join(
                "=" if (i + self.title_scroll_x) % 10 < 5 else " "
                for i in range(self.scroll_bar_width)
            )
        )
        gotoxy(0, self.menu_y_start + 8, out)
        out.write(
            "".join(
                "=" if _c_mod(i - self.title_scroll_x + 100, 10) < 5 else " "
                for i in range(self.scroll_bar_width)
            )
        )
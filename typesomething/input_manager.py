"""Translates held keys into lane judgements and marker states."""

from __future__ import annotations

from collections.abc import Iterable

from typesomething.enums import JudgeResult, Key, Tile
from typesomething.node_scroll import NodeManager
from typesomething.player import Player

_LANE_KEYS = (
    frozenset({Key.D, Key.F}),
    frozenset({Key.J, Key.K}),
)
_SHOWN_RESULTS = (JudgeResult.PERFECT, JudgeResult.GOOD)


def _as_key(key: Key | str) -> Key:
    if isinstance(key, Key):
        return key
    try:
        return Key[key.upper()]
    except KeyError:
        raise ValueError(f"unknown key: {key!r}") from None


class InputManager:
    """Judges the lanes whose keys are held and updates the player's markers."""

    def __init__(self, node_manager: NodeManager) -> None:
        self.node_manager = node_manager

    def update(self, pressed_keys: Iterable[Key | str], player: Player) -> tuple[bool, bool]:
        """Process one frame of input.

        `pressed_keys` holds the keys currently down, as `Key` members or
        their letters. Returns whether each lane (upper, lower) is pressed.
        """
        pressed = {_as_key(key) for key in pressed_keys}
        states = []
        for lane, lane_keys in enumerate(_LANE_KEYS):
            marker = player.get_node(lane + 1)
            held = bool(pressed & lane_keys)
            states.append(held)
            if held:
                marker.tile_state = Tile.OUTPUT_NODE
                result = self.node_manager.judge(lane)
                if result in _SHOWN_RESULTS:
                    self.node_manager.register_judge_msg(lane, result, 30)
            else:
                marker.tile_state = Tile.INPUT_NODE
        return states[0], states[1]
"""The player's two judgement markers."""

from __future__ import annotations

from dataclasses import dataclass, field

from typesomething.enums import Tile


@dataclass
class Position:
    """A cell position on screen."""

    x: int = 0
    y: int = 0

    def set_xy(self, x: int, y: int) -> None:
        """Move to (x, y)."""
        self.x = x
        self.y = y


@dataclass
class PlayerNode:
    """One of the player's markers and how it is drawn."""

    position: Position = field(default_factory=Position)
    tile_state: Tile = Tile.INPUT_NODE


class Player:
    """The player: an upper and a lower marker, and a life count."""

    def __init__(self) -> None:
        self.upper = PlayerNode()
        self.lower = PlayerNode()
        self.life = 0
        self.is_dead = False

    def init_player(self, life: int) -> None:
        """Place both markers on the judge line and reset life."""
        self.upper.position.set_xy(10, 10)
        self.lower.position.set_xy(10, 15)
        self.upper.tile_state = Tile.INPUT_NODE
        self.lower.tile_state = Tile.INPUT_NODE
        self.life = life
        self.is_dead = False

    def get_node(self, number: int) -> PlayerNode | None:
        """Return the upper marker for 1, the lower for 2, otherwise None."""
        if number == 1:
            return self.upper
        if number == 2:
            return self.lower
        return None
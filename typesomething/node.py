"""A single scrolling note."""

from dataclasses import dataclass


@dataclass
class Node:
    """A note in the play area; inactive nodes are free pool slots."""

    active: bool = False
    spawn_time: float = 0.0
    lane: int = 0
    x: int = 0
    y: int = 0
    is_hit: bool = False
    prev_x: int = 0
    prev_y: int = 0

    def activate(self, time: float, lane: int, start_x: int, start_y: int) -> None:
        """Put the node into play at the given position."""
        self.active = True
        self.spawn_time = time
        self.lane = lane
        self.x = start_x
        self.y = start_y
        self.prev_x = start_x
        self.prev_y = start_y
        self.is_hit = False

    def deactivate(self) -> None:
        """Take the node out of play."""
        self.active = False
"""Note chart loading, scrolling and judgement."""

from __future__ import annotations

import os
import sys
from collections import deque
from dataclasses import dataclass
from typing import TextIO

from typesomething.console import gotoxy
from typesomething.enums import JudgeResult, Tile
from typesomething.node import Node

_MAX_MESSAGES = 10
_RESULT_TEXT = {
    JudgeResult.PERFECT: "PERFECT!",
    JudgeResult.GOOD: "GOOD!",
    JudgeResult.MISS: "MISS!",
}


@dataclass(frozen=True)
class ChartEntry:
    """A note in the chart: when it appears and in which lane."""

    spawn_time: float
    lane: int


@dataclass
class JudgeMsg:
    """A judgement message and the frames it stays on screen."""

    result: JudgeResult
    frames_left: int


def parse_chart(text: str) -> list[ChartEntry]:
    """Read whitespace-separated `time lane` pairs, stopping at the first bad one."""
    entries = []
    tokens = iter(text.split())
    for time_token in tokens:
        lane_token = next(tokens, None)
        if lane_token is None:
            break
        try:
            entries.append(ChartEntry(float(time_token), int(lane_token)))
        except ValueError:
            break
    return entries


class NodeManager:
    """Spawns notes from a chart, scrolls them left and judges key presses."""

    def __init__(self, width: int = 100, height: int = 20, max_node_count: int = 32) -> None:
        self.area_width = width
        self.area_height = height
        self.lane_count = 2
        self.judge_line_x = 10
        self.start_x = width - 2
        self.node_pool = [Node() for _ in range(max_node_count)]
        self.map_buffer = [[Tile.SPACE] * width for _ in range(height)]
        self.judge_msgs: tuple[deque[JudgeMsg], deque[JudgeMsg]] = (
            deque(maxlen=_MAX_MESSAGES),
            deque(maxlen=_MAX_MESSAGES),
        )
        self.chart: list[ChartEntry] = []
        self.next_chart_idx = 0

    def load_chart(self, path: str | os.PathLike) -> None:
        """Replace the chart with the one in the file at `path`."""
        self.chart = []
        self.next_chart_idx = 0
        with open(path, encoding="utf-8") as fin:
            self.chart = parse_chart(fin.read())

    def update(self, current_time: float) -> None:
        """Advance one frame: spawn due notes, scroll, miss and expire messages."""
        while (
            self.next_chart_idx < len(self.chart)
            and current_time >= self.chart[self.next_chart_idx].spawn_time
        ):
            entry = self.chart[self.next_chart_idx]
            free = next((node for node in self.node_pool if not node.active), None)
            if free is not None:
                free.activate(entry.spawn_time, entry.lane, self.start_x, self.lane_to_y(entry.lane))
            self.next_chart_idx += 1

        for node in self.node_pool:
            if not node.active:
                continue
            node.prev_x, node.prev_y = node.x, node.y
            node.x -= 1
            if node.x < self.judge_line_x - 3 and not node.is_hit:
                self.register_judge_msg(node.lane, JudgeResult.MISS, 30)
                node.deactivate()
            elif node.x < 0 or node.is_hit:
                node.deactivate()

        for messages in self.judge_msgs:
            for msg in messages:
                if msg.frames_left > 0:
                    msg.frames_left -= 1
            while messages and messages[0].frames_left <= 0:
                messages.popleft()

    def fill_map_buffer(self) -> None:
        """Redraw the tile buffer from the judge line and the active notes."""
        for row in self.map_buffer:
            row[:] = [Tile.SPACE] * self.area_width
        for lane in range(self.lane_count):
            self.map_buffer[self.lane_to_y(lane)][self.judge_line_x] = Tile.ROAD
        for node in self.node_pool:
            if node.active and 0 <= node.x < self.area_width and 0 <= node.y < self.area_height:
                self.map_buffer[node.y][node.x] = Tile.NODE

    def render(self, stream: TextIO | None = None) -> None:
        """Draw the play area and the judgement messages."""
        out = sys.stdout if stream is None else stream
        self.fill_map_buffer()
        for y, row in enumerate(self.map_buffer):
            gotoxy(0, y, out)
            out.write("".join("●" if tile is Tile.NODE else " " for tile in row))

        base_y = self.lane_to_y(0) - 2
        base_x = self.judge_line_x + 13
        for messages in self.judge_msgs:
            for i, msg in enumerate(messages):
                if msg.frames_left > 0:
                    gotoxy(base_x, base_y - i, out)
                    out.write(_RESULT_TEXT.get(msg.result, ""))
        out.flush()

    def nearest_judgeable_node(self, lane: int, judge_range: int) -> Node | None:
        """Return the unhit note in `lane` closest to the judge line within range."""
        best = None
        min_diff = 9999
        for node in self.node_pool:
            if not node.active or node.lane != lane or node.is_hit:
                continue
            diff = abs(node.x - self.judge_line_x)
            if diff <= judge_range and diff < min_diff:
                min_diff = diff
                best = node
        return best

    def judge(self, lane: int) -> JudgeResult:
        """Judge a key press in `lane`, marking the note hit on success."""
        node = self.nearest_judgeable_node(lane, 2)
        if node is not None:
            diff = abs(node.x - self.judge_line_x)
            if diff <= 1:
                self.hit_node(node)
                return JudgeResult.PERFECT
            if diff == 2:
                self.hit_node(node)
                return JudgeResult.GOOD
        return JudgeResult.NONE

    def hit_node(self, node: Node | None) -> None:
        """Mark `node` as hit."""
        if node is not None:
            node.is_hit = True

    def lane_to_y(self, lane: int) -> int:
        """Screen row of a lane."""
        if lane == 0:
            return 10
        if lane == 1:
            return 15
        return self.area_height // 2

    def register_judge_msg(self, lane: int, result: JudgeResult, duration: int = 30) -> None:
        """Queue a judgement message for `lane`, dropping the oldest past ten."""
        if result is JudgeResult.NONE:
            return
        self.judge_msgs[lane].append(JudgeMsg(result, duration))
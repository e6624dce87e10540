# typesomething

This package holds the parts of a two-lane rhythm game that runs in a terminal.
Notes scroll from right to left toward a judge line at column 10. The upper lane
is drawn on row 10 and the lower lane on row 15. You hit a note by holding the
key for its lane as the note crosses the line.

## Installation

```
pip install .
```

## Modules

### `typesomething.enums`

This module defines four enumerations:

- `Key` (`D`, `F`, `J`, `K`)
- `Scene` (`TITLE`, `GAME`, `SETTING`, `QUIT`, `END`)
- `Tile` (`NODE`, `ROAD`, `INPUT_NODE`, `OUTPUT_NODE`, `SPACE`)
- `JudgeResult` (`NONE`, `PERFECT`, `GOOD`, `MISS`)

### `typesomething.console`

These helpers write ANSI escape sequences. Each one takes an optional `stream`,
which defaults to `sys.stdout`.

- `gotoxy(x, y)` moves the cursor. Both coordinates count from zero.
- `set_color(text, background)` sets the text and background colours. Both take a member of the 16-colour `Color` palette. The defaults are white on black.
- `set_cursor_visible(visible)` shows or hides the cursor.
- `set_title(title)` sets the terminal window title.
- `console_resolution()` returns the terminal size as `(columns, rows)`.
- `frame_sync(frame)` waits until more than one frame has passed at `frame` frames per second. It returns the number of seconds it waited. It raises `ValueError` if the rate is not positive.

### `typesomething.node`

`Node` is a dataclass for one note. `activate` puts a node into play at a given position. `deactivate` takes it out of play again.

### `typesomething.player`

`Player` has two markers, `upper` and `lower`. Each marker is a `PlayerNode` with a `Position` and a `tile_state`.

- `init_player(life)` places the markers at (10, 10) and (10, 15) and sets the life count.
- `get_node(1)` returns the upper marker and `get_node(2)` returns the lower marker. Any other number returns `None`.

### `typesomething.node_scroll`

- `parse_chart(text)` reads pairs of values separated by whitespace. Each pair is a spawn time and a lane. Parsing stops at the first pair that is incomplete or malformed.
- `NodeManager(width=100, height=20, max_node_count=32)` runs the notes:
  - `load_chart(path)` replaces the chart with the contents of a file. Errors from opening the file are raised to the caller.
  - `update(current_time)` advances one frame. It does three things:
    - It spawns every note that is due into a free slot in the pool.
    - It moves every active note one column to the left.
    - It records a `MISS` for any unhit note that passes three columns beyond the judge line. It also counts down the judgement messages.
  - `judge(lane)` finds the nearest unhit note in the lane within 2 columns of the judge line. A note 0 or 1 column away gives `PERFECT`, and a note 2 columns away gives `GOOD`. Either way the note is marked as hit. If no such note exists, the result is `NONE`.
  - `register_judge_msg(lane, result, duration=30)` queues a message for the lane. Each lane keeps at most 10 messages and drops the oldest first. A result of `NONE` is ignored.
  - `render(stream=None)` draws the play field and the active judgement messages.
  - The helper methods `fill_map_buffer`, `nearest_judgeable_node`, `hit_node` and `lane_to_y` are also public.

### `typesomething.input_manager`

`InputManager(node_manager)` handles one frame of input through `update(pressed_keys, player)`.

- `pressed_keys` holds the keys that are currently down. They can be `Key` members or their letters.
- D or F plays the upper lane, and J or K plays the lower lane.
- For a held lane, the matching marker becomes `OUTPUT_NODE` and the lane is judged. A `PERFECT` or `GOOD` result is queued as a message.
- For a released lane, the marker goes back to `INPUT_NODE`.
- The method returns whether each lane is held, as `(upper, lower)`.
- An unknown key raises `ValueError`.

### `typesomething.title_scene`

`TitleScene` draws a scrolling banner, two animated bars and a three-entry menu. The entries are start, settings and quit, with labels in Korean.

- `update(up, down, enter, current_scene)` returns the next scene. A key takes effect only on the frame it is first pressed.
- Enter on the first entry returns `Scene.GAME`.
- Enter on the second entry returns `Scene.END`.
- Enter on the third entry returns `Scene.QUIT`.
- `render(stream=None)` draws the screen.
- `init()` resets the scroll offset and the menu selection.

## Chart format

```
1.0 0
1.5 1
2.0 0
```

Each line has a spawn time followed by a lane. Lane 0 is the upper lane and lane 1 is the lower lane.

## Example

```python
import sys
from typesomething.enums import Scene
from typesomething.input_manager import InputManager
from typesomething.node_scroll import NodeManager, parse_chart
from typesomething.player import Player
from typesomething.title_scene import TitleScene

manager = NodeManager()
manager.chart = parse_chart("0.0 0\n0.5 1\n")
player = Player()
player.init_player(3)
inputs = InputManager(manager)

manager.update(0.0)
upper_held, lower_held = inputs.update({"d"}, player)
manager.render(sys.stdout)

title = TitleScene()
scene = title.update(False, False, True, Scene.TITLE)  # Scene.GAME
```

## What is not included

The package has no command and no main game loop. It also has no game screen that ties the pieces together. It does not read the keyboard itself: the caller passes in the keys that are held down. It does not play music or sound effects, and it has no settings screen.

## Running the tests

```
pip install .[test]
pytest
```
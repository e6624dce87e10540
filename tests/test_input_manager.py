import pytest

from typesomething.enums import JudgeResult, Key, Tile
from typesomething.input_manager import InputManager
from typesomething.node_scroll import NodeManager
from typesomething.player import Player


@pytest.fixture
def setup():
    manager = NodeManager()
    player = Player()
    player.init_player(3)
    return InputManager(manager), manager, player


def test_no_keys_leaves_markers_idle(setup):
    inputs, manager, player = setup
    assert inputs.update(set(), player) == (False, False)
    assert player.get_node(1).tile_state is Tile.INPUT_NODE
    assert player.get_node(2).tile_state is Tile.INPUT_NODE
    assert len(manager.judge_msgs[0]) == 0


def test_upper_key_hits_perfect(setup):
    inputs, manager, player = setup
    node = manager.node_pool[0]
    node.activate(0.0, 0, manager.judge_line_x, manager.lane_to_y(0))
    assert inputs.update({Key.D}, player) == (True, False)
    assert node.is_hit
    assert player.get_node(1).tile_state is Tile.OUTPUT_NODE
    assert player.get_node(2).tile_state is Tile.INPUT_NODE
    assert [m.result for m in manager.judge_msgs[0]] == [JudgeResult.PERFECT]


def test_lower_key_letter_hits_good(setup):
    inputs, manager, player = setup
    node = manager.node_pool[0]
    node.activate(0.0, 1, manager.judge_line_x + 2, manager.lane_to_y(1))
    assert inputs.update(["k"], player) == (False, True)
    assert node.is_hit
    assert [m.result for m in manager.judge_msgs[1]] == [JudgeResult.GOOD]
    assert manager.judge_msgs[1][0].frames_left == 30


def test_press_without_note_registers_nothing(setup):
    inputs, manager, player = setup
    assert inputs.update({Key.F, Key.J}, player) == (True, True)
    assert len(manager.judge_msgs[0]) == 0
    assert len(manager.judge_msgs[1]) == 0
    assert player.get_node(2).tile_state is Tile.OUTPUT_NODE


def test_releasing_resets_marker(setup):
    inputs, _, player = setup
    inputs.update({Key.J}, player)
    inputs.update(set(), player)
    assert player.get_node(2).tile_state is Tile.INPUT_NODE


def test_unknown_key_rejected(setup):
    inputs, _, player = setup
    with pytest.raises(ValueError):
        inputs.update({"z"}, player)
from typesomething.node import Node


def test_new_node_is_inactive():
    node = Node()
    assert node.active is False
    assert node.is_hit is False


def test_activate_sets_fields():
    node = Node()
    node.is_hit = True
    node.activate(1.5, 1, 40, 7)
    assert node.active is True
    assert node.spawn_time == 1.5
    assert node.lane == 1
    assert (node.x, node.y) == (40, 7)
    assert (node.prev_x, node.prev_y) == (40, 7)
    assert node.is_hit is False


def test_deactivate_keeps_position():
    node = Node()
    node.activate(0.0, 0, 5, 6)
    node.deactivate()
    assert node.active is False
    assert (node.x, node.y) == (5, 6)
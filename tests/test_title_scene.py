import io

from typesomething.enums import Scene
from typesomething.title_scene import MENUS, TitleScene


def press(scene, up=False, down=False, enter=False, current=Scene.TITLE):
    result = scene.update(up, down, enter, current)
    scene.update(False, False, False, result)
    return result


def test_up_wraps_to_last_item():
    scene = TitleScene()
    press(scene, up=True)
    assert scene.selected_index == len(MENUS) - 1


def test_down_moves_and_wraps():
    scene = TitleScene()
    for _ in range(len(MENUS)):
        press(scene, down=True)
    assert scene.selected_index == 0


def test_held_key_moves_once():
    scene = TitleScene()
    scene.update(False, True, False, Scene.TITLE)
    scene.update(False, True, False, Scene.TITLE)
    assert scene.selected_index == 1


def test_enter_selects_scenes():
    scene = TitleScene()
    assert press(scene, enter=True) is Scene.GAME
    press(scene, down=True)
    assert press(scene, enter=True) is Scene.END
    press(scene, down=True)
    assert press(scene, enter=True) is Scene.QUIT


def test_held_enter_does_not_repeat():
    scene = TitleScene()
    scene.update(False, False, True, Scene.TITLE)
    assert scene.update(False, False, True, Scene.TITLE) is Scene.TITLE


def test_scroll_advances_and_wraps():
    scene = TitleScene()
    width = len(scene.title_lines[0])
    positions = set()
    for _ in range(width):
        scene.update(False, False, False, Scene.TITLE)
        positions.add(scene.title_scroll_x)
        assert 0 <= scene.title_scroll_x < width
    scene2 = TitleScene()
    scene2.update(False, False, False, Scene.TITLE)
    assert scene2.title_scroll_x == 2


def test_title_lines_have_equal_length():
    scene = TitleScene()
    assert len({len(line) for line in scene.title_lines}) == 1


def test_render_marks_selected_menu():
    scene = TitleScene()
    out = io.StringIO()
    scene.render(out)
    text = out.getvalue()
    assert ">  " + MENUS[0] in text
    assert ">  " + MENUS[1] not in text
    assert "  " + MENUS[2] in text


def test_render_top_bar_pattern():
    scene = TitleScene()
    out = io.StringIO()
    scene.render(out)
    assert "\x1b[1;1H" + "=====     " * 10 in out.getvalue()


def test_render_banner_window_width():
    scene = TitleScene()
    out = io.StringIO()
    scene.render(out)
    text = out.getvalue()
    first = scene.title_lines[0]
    assert "\x1b[3;1H" + first[:100] in text
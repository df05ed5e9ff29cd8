import pytest

from playdeck.scene import DrawCommand, DrawList, Frame, Key, Scene


class _Host:
    def __init__(self):
        self.escape_key_valid = True
        self.menu_requests = 0

    def back_to_menu(self):
        self.menu_requests += 1


def test_frame_trigger_and_release():
    frame = Frame(triggered=[Key.ENTER], released={Key.MOUSE_RBUTTON})
    assert frame.is_trigger(Key.ENTER)
    assert not frame.is_trigger(Key.ESCAPE)
    assert frame.is_release(Key.MOUSE_RBUTTON)
    assert not frame.is_release(Key.ENTER)


def test_frame_defaults_are_empty():
    frame = Frame()
    assert not any(frame.is_trigger(key) for key in Key)
    assert not any(frame.is_release(key) for key in Key)
    assert frame.delta == 0


def test_frame_normalises_to_frozenset():
    frame = Frame(triggered=[Key.UP, Key.UP])
    assert frame.triggered == frozenset({Key.UP})


def test_drawlist_records_in_order():
    canvas = DrawList()
    canvas.clear(0, 0, 64)
    canvas.text("hello", 1, 2, size=30, color=(1, 2, 3))
    canvas.line(0, 0, 10, 10, 5, (255, 255, 255))
    canvas.image("dice1", 3, 4)
    kinds = [cmd.kind for cmd in canvas]
    assert kinds == ["clear", "text", "line", "image"]
    assert canvas.commands[1] == DrawCommand("text", ("hello", 1, 2, 30, (1, 2, 3)))


def test_clear_drops_previous_commands():
    canvas = DrawList()
    canvas.text("gone", 0, 0)
    canvas.clear(1, 2, 3)
    assert len(canvas) == 1
    assert canvas.texts() == []


def test_texts_converts_numbers():
    canvas = DrawList()
    canvas.text(42, 0, 0)
    canvas.rect(0, 0, 5, 5)
    canvas.text("x", 0, 0)
    assert canvas.texts() == ["42", "x"]


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene(_Host())


def test_scene_subclass_keeps_host():
    class Blank(Scene):
        def proc(self, frame, canvas):
            canvas.text("blank", 0, 0)

    host = _Host()
    scene = Blank(host)
    scene.create()
    canvas = DrawList()
    scene.proc(Frame(), canvas)
    scene.destroy()
    assert scene.host is host
    assert canvas.texts() == ["blank"]
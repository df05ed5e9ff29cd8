from dataclasses import dataclass, field
from pathlib import Path

import pytest

from playdeck.menu import Menu, load_indices, load_titles, move_index, save_indices
from playdeck.scene import DrawList, Frame, Key


@dataclass
class FakeHost:
    assets_dir: Path
    escape_key_valid: bool = True
    chosen: list = field(default_factory=list)
    menu_requests: int = 0

    def set_next_game(self, game_id):
        self.chosen.append(game_id)

    def back_to_menu(self):
        self.menu_requests += 1


def center(menu, position):
    row, col = divmod(position, menu.cols)
    return (menu.ofst_x + menu.tile_w * col + menu.tile_w / 2,
            menu.ofst_y + menu.tile_h * row + menu.tile_h / 2)


@pytest.fixture
def menu(tmp_path):
    scene = Menu(FakeHost(tmp_path), tmp_path)
    scene.create()
    return scene


def test_move_index_forward_keeps_members():
    moved = move_index(range(6), 1, 4)
    assert moved[4] == 1
    assert sorted(moved) == list(range(6))


def test_move_index_backward_keeps_members():
    moved = move_index(range(6), 5, 0)
    assert moved[0] == 5
    assert moved[1:] == [0, 1, 2, 3, 4]


def test_move_index_same_position_is_identity():
    assert move_index([3, 1, 2], 1, 1) == [3, 1, 2]


def test_move_index_round_trip():
    original = list(range(16))
    assert move_index(move_index(original, 2, 9), 9, 2) == original


def test_move_index_out_of_range():
    with pytest.raises(IndexError):
        move_index([0, 1, 2], 0, 3)


def test_load_indices_missing_file_gives_sequence(tmp_path):
    assert load_indices(tmp_path / "none.bin", 16) == list(range(16))


def test_save_then_load_indices(tmp_path):
    path = tmp_path / "menu" / "indices.bin"
    order = list(reversed(range(16)))
    save_indices(path, order)
    assert load_indices(path, 16) == order


def test_load_indices_short_file_is_padded(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(bytes([7, 3]))
    assert load_indices(path, 4) == [7, 3, 0, 0]


def test_save_indices_rejects_values_beyond_a_byte(tmp_path):
    with pytest.raises(ValueError):
        save_indices(tmp_path / "bad.bin", [256])


def test_load_titles_reads_first_line(tmp_path):
    (tmp_path / "game01").mkdir()
    (tmp_path / "game01" / "title.txt").write_text("Cards\nsecond line\n", encoding="utf-8")
    titles = load_titles(tmp_path, 3)
    assert titles == ["", "Cards", ""]


def test_tile_at_centres_and_outside(menu):
    for position in range(16):
        assert menu.tile_at(*center(menu, position)) == position
    assert menu.tile_at(menu.ofst_x - 1, menu.ofst_y) is None
    assert menu.tile_at(menu.ofst_x, menu.ofst_y + menu.tile_h * menu.rows + 1) is None


def test_right_drag_reorders(menu):
    menu.proc(Frame(triggered={Key.MOUSE_RBUTTON}, mouse_x=center(menu, 0)[0],
                    mouse_y=center(menu, 0)[1]), DrawList())
    assert menu.holding == 0
    x, y = center(menu, 3)
    menu.proc(Frame(released={Key.MOUSE_RBUTTON}, mouse_x=x, mouse_y=y), DrawList())
    assert menu.indices[3] == 0
    assert sorted(menu.indices) == list(range(16))
    assert menu.holding is None


def test_leaving_grid_drops_held_tile(menu):
    x, y = center(menu, 5)
    menu.proc(Frame(triggered={Key.MOUSE_RBUTTON}, mouse_x=x, mouse_y=y), DrawList())
    menu.proc(Frame(mouse_x=0, mouse_y=0), DrawList())
    assert menu.holding is None
    assert menu.indices == list(range(16))


def test_left_click_launches_game_in_tile(menu):
    menu.indices = move_index(menu.indices, 9, 2)
    x, y = center(menu, 2)
    menu.proc(Frame(triggered={Key.MOUSE_LBUTTON}, mouse_x=x, mouse_y=y), DrawList())
    assert menu.host.chosen == [9]


def test_draw_shows_titles(tmp_path):
    (tmp_path / "game00").mkdir()
    (tmp_path / "game00" / "title.txt").write_text("Blocks\n", encoding="utf-8")
    scene = Menu(FakeHost(tmp_path), tmp_path)
    scene.create()
    canvas = DrawList()
    scene.proc(Frame(), canvas)
    assert canvas.texts()[0] == "Menu"
    assert "Blocks" in canvas.texts()
    assert sum(1 for cmd in canvas if cmd.kind == "rect") == 16


def test_destroy_persists_order(tmp_path):
    scene = Menu(FakeHost(tmp_path), tmp_path)
    scene.create()
    scene.indices = move_index(scene.indices, 15, 0)
    scene.destroy()
    again = Menu(FakeHost(tmp_path), tmp_path)
    again.create()
    assert again.indices == scene.indices
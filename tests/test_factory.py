from dataclasses import dataclass
from pathlib import Path

import pytest

from playdeck.factory import GameId, create_scene
from playdeck.menu import Menu
from playdeck.placeholder import EscapeGame, PlaceholderGame
from playdeck.scene import DrawList, Frame, Key
from playdeck.tabletop import TableGame


@dataclass
class FakeHost:
    assets_dir: Path
    escape_key_valid: bool = True
    menu_requests: int = 0

    def set_next_game(self, game_id):
        pass

    def back_to_menu(self):
        self.menu_requests += 1


@pytest.mark.parametrize("game_id", [0, 1, 3, 7, 14])
def test_placeholder_slots_show_their_name(tmp_path, game_id):
    host = FakeHost(tmp_path)
    scene = create_scene(game_id, host)
    canvas = DrawList()
    scene.proc(Frame(triggered={Key.ENTER}), canvas)
    assert isinstance(scene, PlaceholderGame)
    assert canvas.texts()[0] == f"GAME{game_id:02d}"
    assert host.menu_requests == 1


def test_game02_is_table_of_games(tmp_path):
    host = FakeHost(tmp_path)
    scene = create_scene(GameId.GAME02, host)
    scene.create()
    assert isinstance(scene, TableGame)
    assert host.escape_key_valid is False


def test_game15_takes_over_escape(tmp_path):
    host = FakeHost(tmp_path)
    scene = create_scene(GameId.GAME15, host)
    scene.create()
    assert isinstance(scene, EscapeGame)
    assert host.escape_key_valid is False


def test_menu_uses_host_assets(tmp_path):
    scene = create_scene(GameId.MENU, FakeHost(tmp_path))
    assert isinstance(scene, Menu)
    assert scene.assets_dir == tmp_path


@pytest.mark.parametrize("bad", [16, 99, -1])
def test_unknown_id_raises(tmp_path, bad):
    with pytest.raises(ValueError):
        create_scene(bad, FakeHost(tmp_path))